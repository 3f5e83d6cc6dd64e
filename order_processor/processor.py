"""
Batch entry points

``process_orders`` turns a pasted order history export into spreadsheet
rows plus a summary; ``process_order_numbers`` turns a list of order
numbers into order page links. Both are pure functions of their input.
"""
import logging
from decimal import Decimal

from .detector import detect_format
from .errors import BatchProcessingError, EmptyInputError
from .records import split_records, tokenize_record
from .sets import EMPTY_SET_MAPPINGS
from .urls import generate_urls

logger = logging.getLogger(__name__)


def summarize(orders, total_net, direct_count):
    return {
        'totalOrders': len(orders),
        'totalNet': total_net,
        'allDirect': direct_count == len(orders),
        'dateRange': orders[0]['Date'] if orders else '',
    }


def process_orders(input_data, set_mappings=EMPTY_SET_MAPPINGS):
    """Parse a pasted export and return ``(orders, summary)``"""
    if not input_data or not input_data.strip():
        raise EmptyInputError('Please paste data to process')

    try:
        lines = input_data.strip().split('\n')
        extractor = detect_format(lines)
        records = split_records(lines[1:])
        logger.info("Processing %d %s records", len(records), extractor.name)

        orders = []
        total_net = Decimal('0')
        direct_count = 0

        for record in records:
            columns = tokenize_record(record)
            if not extractor.accepts(columns):
                logger.debug("Skipping record with %d columns", len(columns))
                continue

            order, net = extractor.extract(columns, set_mappings)
            orders.append(order)
            total_net += net
            if extractor.is_direct(columns):
                direct_count += 1

    except Exception as e:
        logger.exception("Order batch failed")
        raise BatchProcessingError(e) from e

    summary = summarize(orders, total_net, direct_count)
    logger.info("Processed %d orders, net %s", summary['totalOrders'], summary['totalNet'])
    return orders, summary


def process_order_numbers(input_data):
    """Expand pasted order numbers and return ``(urls, summary)``"""
    if not input_data or not input_data.strip():
        raise EmptyInputError('Please paste order numbers to process')

    try:
        urls = generate_urls(input_data.strip().split('\n'))
    except Exception as e:
        logger.exception("Order number batch failed")
        raise BatchProcessingError(e) from e

    summary = {
        'totalOrders': len(urls),
        'totalNet': Decimal('0'),
        'allDirect': False,
        'dateRange': '',
    }
    return urls, summary
