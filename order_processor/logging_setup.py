"""Logging bootstrap shared by the serverless functions"""
import logging

from . import config

_configured = False


def configure_logging(level=None):
    """Apply the configured log level once per process"""
    global _configured
    if _configured:
        return
    logging.basicConfig(
        level=level or config.LOG_LEVEL,
        format='%(asctime)s %(levelname)s %(name)s: %(message)s',
    )
    _configured = True
