"""Spreadsheet text for processed orders"""
import csv
import io
import re
from datetime import date

from . import config

_CURRENCY_PREFIX = re.compile(r'^\$\s*')


def _tsv_value(order, field):
    value = str(order.get(field) or '')
    if field in ('Sell Dollars', 'Direct'):
        value = _CURRENCY_PREFIX.sub('', value)
    if field == 'Raw Data':
        value = value.replace('\r\n', ' | ').replace('\n', ' | ').replace('\t', ' ').replace('"', '""')
        value = f'"{value}"'
    return value


def to_tsv(orders):
    """Tab separated rows, no header, ready to paste into a spreadsheet"""
    return '\n'.join(
        '\t'.join(_tsv_value(order, field) for field in config.ORDER_FIELDS)
        for order in orders
    )


def to_csv(orders):
    """Comma separated file contents: plain header row, every value quoted"""
    buf = io.StringIO()
    buf.write(','.join(config.ORDER_FIELDS) + '\n')
    writer = csv.writer(buf, quoting=csv.QUOTE_ALL, lineterminator='\n')
    for order in orders:
        writer.writerow([str(order.get(field) or '') for field in config.ORDER_FIELDS])
    return buf.getvalue().rstrip('\n')


def export_filename(today=None):
    today = today or date.today()
    return config.EXPORT_FILENAME.format(today.isoformat())
