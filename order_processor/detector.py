"""Choosing the export layout for a pasted batch"""
from . import config
from .extractors import ManapoolExtractor, TCGplayerExtractor

MANAPOOL = ManapoolExtractor()
TCGPLAYER = TCGplayerExtractor()

FORMATS = (MANAPOOL, TCGPLAYER)


def detect_format(lines):
    """
    Pick the extractor from the first line after the header.

    The choice applies to the whole batch; a batch that mixes both exports
    is read entirely with the detected layout.
    """
    first_data_line = lines[1] if len(lines) > 1 else ''
    if config.MANAPOOL_MARKER in first_data_line:
        return MANAPOOL
    return TCGPLAYER
