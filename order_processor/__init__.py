"""
TCGplayer / Manapool order history processor
"""
from .errors import BatchProcessingError, EmptyInputError, OrderProcessorError, SetMappingError
from .export import export_filename, to_csv, to_tsv
from .processor import process_order_numbers, process_orders
from .sets import load_set_mappings, load_set_mappings_file, resolve_set

__version__ = '0.3.0'

__all__ = [
    'BatchProcessingError',
    'EmptyInputError',
    'OrderProcessorError',
    'SetMappingError',
    'export_filename',
    'load_set_mappings',
    'load_set_mappings_file',
    'process_order_numbers',
    'process_orders',
    'resolve_set',
    'to_csv',
    'to_tsv',
]
