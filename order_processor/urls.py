"""Order number to order page links"""
import re

from . import config

MANAPOOL_ID = re.compile(r'^[a-f0-9]{8}-[a-f0-9]{4}-[a-f0-9]{4}-[a-f0-9]{4}-[a-f0-9]{12}$', re.IGNORECASE)
TCGPLAYER_ID = re.compile(r'^[A-F0-9]{8}-[A-F0-9]{6}-[A-F0-9]{5}$', re.IGNORECASE)


def classify_order_number(order_number):
    """Return 'url', 'manapool', 'tcgplayer' or 'unknown'"""
    if order_number.startswith(config.LINK_PREFIX):
        return 'url'
    if MANAPOOL_ID.match(order_number):
        return 'manapool'
    if TCGPLAYER_ID.match(order_number):
        return 'tcgplayer'
    return 'unknown'


def order_url(order_number):
    """Order page link for one order number; unrecognised numbers go to TCGplayer"""
    kind = classify_order_number(order_number)
    if kind == 'url':
        return order_number
    if kind == 'manapool':
        return config.MANAPOOL_ORDER_URL.format(order_number)
    return config.TCGPLAYER_ORDER_URL.format(order_number)


def generate_urls(lines):
    """Links for every non-blank line, in input order"""
    urls = []
    for line in lines:
        order_number = line.strip()
        if not order_number:
            continue
        urls.append(order_url(order_number))
    return urls
