"""
Set code lookup

The mapping table is an ordered ``{set name substring: set code}`` mapping
owned by the caller. Nothing here keeps a copy between calls.
"""
import logging
from types import MappingProxyType

from . import config
from .errors import SetMappingError

logger = logging.getLogger(__name__)

EMPTY_SET_MAPPINGS = MappingProxyType({})


def load_set_mappings(csv_text):
    """Parse set mapping CSV text (header row skipped) into a read-only mapping"""
    mappings = {}
    lines = (csv_text or '').strip().split('\n')

    for line in lines[1:]:
        line = line.strip()
        if not line:
            continue
        parts = line.split(',')
        if len(parts) < 2:
            logger.debug("Skipping set mapping row without a code: %r", line)
            continue
        set_name = parts[0].strip()
        set_code = parts[1].strip()
        # First row for a name keeps precedence
        mappings.setdefault(set_name, set_code)

    return MappingProxyType(mappings)


def load_set_mappings_file(path=None):
    """Read the mapping CSV from disk"""
    path = path or config.SET_MAPPINGS_PATH
    try:
        with open(path, encoding='utf-8') as fh:
            text = fh.read()
    except (OSError, UnicodeDecodeError) as e:
        raise SetMappingError(f"Cannot read set mappings from {path}: {e}") from e

    mappings = load_set_mappings(text)
    logger.info("Loaded %d set mappings from %s", len(mappings), path)
    return mappings


def extract_set_code(product, set_mappings):
    """Return the code of the first set name contained in ``product``"""
    for set_name, code in set_mappings.items():
        if set_name in product:
            return code
    return config.UNKNOWN_SET


def resolve_set(description, set_mappings):
    """
    Collapse per-item set codes into one value for the whole order.

    No recognised set gives ``Unknown``, a single distinct code gives that
    code and more than one gives ``Various``.
    """
    if not description:
        return config.UNKNOWN_SET

    codes = []
    for product in description.split(','):
        code = extract_set_code(product.strip(), set_mappings)
        if code != config.UNKNOWN_SET and code not in codes:
            codes.append(code)

    if len(codes) > 1:
        return config.VARIOUS_SETS
    if len(codes) == 1:
        return codes[0]
    return config.UNKNOWN_SET
