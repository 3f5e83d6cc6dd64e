"""Splitting pasted export text into per-order blocks and columns"""
from . import config


def split_records(lines):
    """
    Group data lines (header already removed) into one block per order.

    A line that starts with an order link opens a new block; every other
    line is a continuation of the block being built.
    """
    records = []
    current = ''

    for line in lines:
        if line.startswith(config.LINK_PREFIX):
            if current:
                records.append(current)
            current = line
        else:
            current += '\n' + line

    if current:
        records.append(current)

    return records


def _strip_quote_edges(column):
    if column.startswith('"'):
        column = column[1:]
    if column.endswith('"'):
        column = column[:-1]
    return column


def tokenize_record(record):
    """Split a block on tabs, keeping tabs and newlines inside quotes"""
    columns = []
    current = []
    in_quotes = False

    for char in record:
        if char == '"':
            in_quotes = not in_quotes
        elif char == '\t' and not in_quotes:
            columns.append(_strip_quote_edges(''.join(current)))
            current = []
        else:
            current.append(char)

    # A trailing empty column is not emitted
    if current:
        columns.append(_strip_quote_edges(''.join(current)))

    return columns
