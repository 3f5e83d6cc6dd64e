"""Errors raised while processing a pasted batch"""


class OrderProcessorError(Exception):
    """Base class for batch-level failures"""


class EmptyInputError(OrderProcessorError):
    """Nothing was pasted, so no processing is attempted"""


class BatchProcessingError(OrderProcessorError):
    """An unexpected failure aborted the whole batch"""

    def __init__(self, reason):
        self.reason = str(reason)
        super().__init__(f"Processing error: {self.reason}")


class SetMappingError(OrderProcessorError):
    """The set mapping table could not be loaded"""
