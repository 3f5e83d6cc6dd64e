"""
Order processor settings

Fixed spreadsheet labels live here as module constants. The two settings
that change between deployments are read from the environment.
"""
import os
from pathlib import Path

# Spreadsheet column order for every processed order
ORDER_FIELDS = [
    'Date', 'Description', 'Type', 'Set', 'Store', 'Expense', 'Payment',
    'Buy Dollars', 'Sell Dollars', 'Grouping Code', 'Direct', 'Notes', 'Raw Data'
]

ORDER_TYPE = 'Singles'
EXPENSE = '100%'
PAYMENT = 'Fidelity Magic'

STORE_MANAPOOL = 'Manapool'
STORE_TCGPLAYER = 'TCGplayer'
STORE_TCGPLAYER_DIRECT = 'Direct TCGplayer'

UNKNOWN_SET = 'Unknown'
VARIOUS_SETS = 'Various'
CANCELED = 'Canceled'
CANCELED_SET = 'N/A'

# Input markers
LINK_PREFIX = 'https://'
MANAPOOL_MARKER = 'manapool.com'
PRODUCT_MARKER = 'Magic -'
DIRECT_FULFILLMENT = 'Direct'

MANAPOOL_ORDER_URL = 'https://manapool.com/seller/orders/{}'
TCGPLAYER_ORDER_URL = 'https://sellerportal.tcgplayer.com/orders/{}'

EXPORT_FILENAME = 'TCGPlayer_Orders_{}.csv'

DEFAULT_SET_MAPPINGS = Path(__file__).resolve().parent / 'set-mappings.csv'
SET_MAPPINGS_PATH = os.getenv('ORDER_PROCESSOR_SET_MAPPINGS') or str(DEFAULT_SET_MAPPINGS)

LOG_LEVEL = os.getenv('ORDER_PROCESSOR_LOG_LEVEL', 'INFO').upper()
