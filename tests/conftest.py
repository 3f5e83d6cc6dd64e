from types import MappingProxyType

import pytest

MANAPOOL_HEADER = 'Order\tDetails\tEarnings\tCards'
TCGPLAYER_HEADER = '\t'.join([
    'Order', 'Products', 'Transaction', 'General', 'Order Number',
    'Status', 'Order Date', 'Fulfillment', 'Buyer',
])

MANAPOOL_ID_1 = '1ccca6e6-7d39-4e03-889a-5b0aa24eee34'
MANAPOOL_ID_2 = '2ddda6e6-7d39-4e03-889a-5b0aa24eee35'


def manapool_record(order_id, date, earnings, card_lines):
    cards = '\n'.join(card_lines)
    return (
        f'https://manapool.com/seller/orders/{order_id}\t'
        f'Order placed on {date}\t'
        f'Earnings ${earnings}\t'
        f'"{cards}"'
    )


def tcgplayer_record(order_number, products, transaction, date, fulfillment):
    return '\t'.join([
        f'https://sellerportal.tcgplayer.com/orders/{order_number}',
        f'"{products}"',
        f'"{transaction}"',
        '"Buyer: Sample Buyer"',
        order_number,
        'Shipped',
        date,
        fulfillment,
        'Sample Buyer',
    ])


@pytest.fixture
def set_mappings():
    return MappingProxyType({
        'Modern Horizons 3': 'MH3',
        'Modern Horizons 2': 'MH2',
        'Modern Horizons': 'MH1',
        'Dominaria Remastered': 'DMR',
        'Bloomburrow': 'BLB',
    })


@pytest.fixture
def manapool_batch():
    first = manapool_record(MANAPOOL_ID_1, '03/15/2025', '12.50', [
        'Lightning Bolt',
        'Modern Horizons 3 • #123',
        'NM',
        'Foil',
        '2x',
        '$3.00',
        'Ragavan',
        'Modern Horizons 2 • #138',
        'LP',
        'Etched Foil',
        '1x',
        '$6.50',
    ])
    second = manapool_record(MANAPOOL_ID_2, '03/16/2025', '4.25', [
        'Counterspell',
        'Dominaria Remastered • #45',
        'NM',
        '1x',
        '$4.25',
    ])
    return '\n'.join([MANAPOOL_HEADER, first, second])


@pytest.fixture
def tcgplayer_batch():
    products = '\n'.join([
        'Magic - Bloomburrow: Fabled Passage - #252 - Near Mint Foil\t',
        '$5.00',
        '\t2\t$10.00',
        "Magic - Bloomburrow: Innkeeper's Talent - #180 - Lightly Played\t",
        '$20.00',
        '\t1\t$20.00',
    ])
    direct = tcgplayer_record(
        '8B5DCE37-050272-E8FFC',
        products,
        'Net Amount $25.50\nFee Amount ($4.50)\nDirect Program Fee ($0.00)',
        '3/5/2025 10:12 AM',
        'Direct',
    )
    canceled = tcgplayer_record(
        '1A2B3C4D-123456-ABCDE',
        'Magic - Bloomburrow: Lumra - #178 - Near Mint\t\n$1.00\n\t1\t$1.00',
        'Net Amount $0.00\nFee Amount ($0.00)',
        '3/6/2025',
        'Normal',
    )
    return '\n'.join([TCGPLAYER_HEADER, direct, canceled])
