"""
Per-marketplace field extraction

Each extractor turns one tokenized row into an order dict with the
spreadsheet columns from ``config.ORDER_FIELDS``. A field that does not
match its pattern falls back to an empty/zero default; the row is never
rejected for it.
"""
import logging
import re
from decimal import Decimal

from . import config
from .descriptions import parse_manapool_description, parse_product_description
from .money import format_currency, to_decimal
from .sets import resolve_set

logger = logging.getLogger(__name__)

UUID_PATTERN = re.compile(r'([a-f0-9]{8}-[a-f0-9]{4}-[a-f0-9]{4}-[a-f0-9]{4}-[a-f0-9]{12})', re.IGNORECASE)
LOOSE_DATE_PATTERN = re.compile(r'(\d{1,2}/\d{1,2}/\d{4})')


def parse_date(date_str):
    """First M/D/YYYY in the field, or the field unchanged"""
    match = LOOSE_DATE_PATTERN.search(date_str or '')
    return match.group(1) if match else date_str


def raw_data(*columns):
    """Audit copy of the source columns on a single line"""
    return '\n\n'.join(columns).replace('\n', ' | ').replace('\t', ' ')


def new_order(**fields):
    order = {
        'Date': '',
        'Description': '',
        'Type': config.ORDER_TYPE,
        'Set': config.UNKNOWN_SET,
        'Store': '',
        'Expense': config.EXPENSE,
        'Payment': config.PAYMENT,
        'Buy Dollars': '',
        'Sell Dollars': '',
        'Grouping Code': '',
        'Direct': '',
        'Notes': '',
        'Raw Data': '',
    }
    order.update(fields)
    return order


class OrderExtractor:
    """Extraction steps shared by both export layouts"""

    name = ''
    min_columns = 0

    def accepts(self, columns):
        return len(columns) >= self.min_columns

    def order_id(self, columns):
        raise NotImplementedError

    def order_date(self, columns):
        raise NotImplementedError

    def net_amount(self, columns):
        raise NotImplementedError

    def description(self, columns):
        raise NotImplementedError

    def store(self, columns):
        raise NotImplementedError

    def direct_fee(self, columns):
        return Decimal('0')

    def raw_columns(self, columns):
        return columns[1:4]

    def is_direct(self, columns):
        return False

    def is_canceled(self, net):
        return False

    def extract(self, columns, set_mappings):
        """Return ``(order, net)`` for a row; net is what the row adds to the batch total"""
        net = self.net_amount(columns)
        canceled = self.is_canceled(net)
        order = new_order(
            Date=self.order_date(columns),
            Description=self.description(columns),
            Store=self.store(columns),
            Direct=format_currency(self.direct_fee(columns)) if self.is_direct(columns) else '',
            Notes=self.order_id(columns),
            **{'Raw Data': raw_data(*self.raw_columns(columns))}
        )

        if net is None:
            net = Decimal('0')
        else:
            net = abs(net)
            order['Sell Dollars'] = format_currency(net)

        if canceled:
            order['Description'] = config.CANCELED
            order['Set'] = config.CANCELED_SET
        else:
            order['Set'] = resolve_set(order['Description'], set_mappings)

        return order, net


class ManapoolExtractor(OrderExtractor):
    """
    Manapool order history columns:
    0 order link, 1 order details, 2 earnings, 3 cards
    """

    name = 'manapool'
    min_columns = 4

    DATE_PATTERN = re.compile(r'Order placed on (\d{2}/\d{2}/\d{4})')
    EARNINGS_PATTERN = re.compile(r'Earnings\s+\$?(\d+(?:\.\d*)?|\.\d+)')

    def order_id(self, columns):
        match = UUID_PATTERN.search(columns[0])
        return match.group(1) if match else ''

    def order_date(self, columns):
        match = self.DATE_PATTERN.search(columns[1])
        return match.group(1) if match else ''

    def net_amount(self, columns):
        match = self.EARNINGS_PATTERN.search(columns[2])
        if not match:
            logger.debug("No earnings found in %r", columns[2][:80])
            return Decimal('0')
        return to_decimal(match.group(1))

    def description(self, columns):
        return parse_manapool_description(columns[3])

    def store(self, columns):
        return config.STORE_MANAPOOL


class TCGplayerExtractor(OrderExtractor):
    """
    TCGplayer seller portal columns:
    1 products, 2 transaction, 3 general, 4 order number, 6 date, 7 fulfillment
    """

    name = 'tcgplayer'
    min_columns = 9

    FEE_PATTERN = re.compile(r'Fee Amount\s+\(\$?(\d+\.\d{2})\)')
    DIRECT_FEE_PATTERN = re.compile(r'Direct Program Fee\s+\(\$?(\d+\.\d{2})\)')
    NET_PATTERN = re.compile(r'Net Amount\s+\$?(-?\d+\.\d{2})')

    def is_direct(self, columns):
        return columns[7] == config.DIRECT_FULFILLMENT

    def order_id(self, columns):
        return columns[4]

    def order_date(self, columns):
        return parse_date(columns[6])

    def net_amount(self, columns):
        match = self.NET_PATTERN.search(columns[2])
        if not match:
            logger.debug("No net amount for order %s", columns[4])
            return None
        return to_decimal(match.group(1))

    def direct_fee(self, columns):
        """Direct Program Fee when positive, else the generic fee, else zero"""
        direct_match = self.DIRECT_FEE_PATTERN.search(columns[2])
        if direct_match:
            direct_fee = to_decimal(direct_match.group(1))
            if direct_fee > 0:
                return direct_fee
        fee_match = self.FEE_PATTERN.search(columns[2])
        if fee_match:
            return to_decimal(fee_match.group(1))
        return Decimal('0')

    def description(self, columns):
        return parse_product_description(columns[1])

    def store(self, columns):
        if self.is_direct(columns):
            return config.STORE_TCGPLAYER_DIRECT
        return config.STORE_TCGPLAYER

    def is_canceled(self, net):
        """A net amount of exactly zero marks a canceled order"""
        return net is not None and net == 0
