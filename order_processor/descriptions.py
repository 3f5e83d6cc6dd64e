"""
Card description parsers

Manapool lists each card over several lines of a single column; TCGplayer
puts one product per marked line with the quantity two lines below. Both
parsers turn that into line items of the form

    2x Set Name: Card Name - #123 - NM Foil

and return them joined with ", ".
"""
import logging
import re
from enum import Enum

from . import config

logger = logging.getLogger(__name__)

SET_SEPARATOR = '•'

# Leading numeric prefix, the way a browser's parseFloat/parseInt read a string
_FLOAT_PREFIX = re.compile(r'^\s*[+-]?(?:Infinity|\d+\.?\d*(?:[eE][+-]?\d+)?|\.\d+(?:[eE][+-]?\d+)?)')
_INT_PREFIX = re.compile(r'^\s*([+-]?\d+)')

_TCG_QUANTITY = re.compile(r'^\s*(\d+)\s*\t')


def _has_float_prefix(text):
    return bool(_FLOAT_PREFIX.match(text))


def _leading_int(text):
    match = _INT_PREFIX.match(text)
    return int(match.group(1)) if match else None


def format_line_item(item):
    """Render one card dict as a description line item"""
    suffix = f" {item['specialAttribute']}" if item.get('specialAttribute') else ''
    return (
        f"{item['quantity']}x {item['setName']}: {item['name']} - "
        f"#{item['collectorNumber']} - {item['condition']}{suffix}"
    )


class CardState(Enum):
    EXPECT_NAME = 'expect_name'
    EXPECT_SET_LINE = 'expect_set_line'
    EXPECT_CONDITION = 'expect_condition'
    EXPECT_OPTIONAL_ATTR = 'expect_optional_attr'
    EXPECT_QUANTITY = 'expect_quantity'
    EXPECT_OPTIONAL_PRICE = 'expect_optional_price'


class ManapoolCardParser:
    """
    Cursor based state machine over the non-blank lines of a card column.

    Each card walks the states in a fixed order. The set line and the
    condition line are always consumed; the attribute, quantity and price
    lines are consumed only when they look like one, so the cursor never
    has to move backwards.
    """

    def __init__(self, cards_text):
        lines = [l.strip() for l in (cards_text or '').split('\n')]
        self.lines = [l for l in lines if l]
        self.pos = 0
        self.state = CardState.EXPECT_NAME
        self.card = None
        self.cards = []

    def peek(self):
        if self.pos < len(self.lines):
            return self.lines[self.pos]
        return None

    def advance(self):
        self.pos += 1

    def parse(self):
        """Run the machine to the end of input and return the card dicts"""
        handlers = {
            CardState.EXPECT_NAME: self.expect_name,
            CardState.EXPECT_SET_LINE: self.expect_set_line,
            CardState.EXPECT_CONDITION: self.expect_condition,
            CardState.EXPECT_OPTIONAL_ATTR: self.expect_optional_attr,
            CardState.EXPECT_QUANTITY: self.expect_quantity,
            CardState.EXPECT_OPTIONAL_PRICE: self.expect_optional_price,
        }
        while self.state is not None:
            self.state = handlers[self.state](self.peek())
        return self.cards

    def expect_name(self, line):
        if line is None:
            return None
        self.card = {
            'name': line,
            'quantity': 1,
            'setName': '',
            'collectorNumber': '',
            'condition': 'NM',
            'specialAttribute': '',
        }
        self.advance()
        return CardState.EXPECT_SET_LINE

    def expect_set_line(self, line):
        if line and SET_SEPARATOR in line:
            parts = [p.strip() for p in line.split(SET_SEPARATOR)]
            self.card['setName'] = parts[0]
            if len(parts) > 1 and parts[1].startswith('#'):
                self.card['collectorNumber'] = parts[1][1:]
        self.advance()
        return CardState.EXPECT_CONDITION

    def expect_condition(self, line):
        if line:
            self.card['condition'] = line
        self.advance()
        return CardState.EXPECT_OPTIONAL_ATTR

    def expect_optional_attr(self, line):
        # Foil and similar markers: text that is neither a quantity nor a number
        if line and 'x' not in line and not _has_float_prefix(line):
            self.card['specialAttribute'] = line
            self.advance()
        return CardState.EXPECT_QUANTITY

    def expect_quantity(self, line):
        if line and ('x' in line or _leading_int(line) is not None):
            quantity = _leading_int(line.replace('x', '', 1))
            self.card['quantity'] = quantity if quantity and quantity > 0 else 1
            self.advance()
        return CardState.EXPECT_OPTIONAL_PRICE

    def expect_optional_price(self, line):
        if line and line.startswith('$'):
            self.advance()
        self.cards.append(self.card)
        self.card = None
        return CardState.EXPECT_NAME


def parse_manapool_cards(cards_text):
    """Card dicts for a Manapool card column"""
    return ManapoolCardParser(cards_text).parse()


def parse_manapool_description(cards_text):
    """Description string for a Manapool card column"""
    return ', '.join(format_line_item(card) for card in parse_manapool_cards(cards_text))


def _split_foil(condition):
    if 'Foil' in condition:
        return condition.replace(' Foil', '', 1), ' Foil'
    return condition, ''


def parse_product_description(products_text):
    """
    Description string for a TCGplayer products column.

    Layout per product:
        Magic - Set Name: Card Name - #123 - Near Mint Foil<TAB>
        $1.23
        <TAB>2<TAB>$2.46
    """
    descriptions = []
    lines = (products_text or '').split('\n')

    for i, line in enumerate(lines):
        if config.PRODUCT_MARKER not in line:
            continue

        product_info = line.replace(config.PRODUCT_MARKER + ' ', '', 1).rstrip('\t').strip()

        quantity = 1
        if i + 2 < len(lines):
            qty_match = _TCG_QUANTITY.match(lines[i + 2])
            if qty_match:
                quantity = int(qty_match.group(1)) or 1

        colon = product_info.find(':')
        if colon > 0:
            set_name = product_info[:colon].strip()
            details = product_info[colon + 1:].strip().split(' - ')
            if len(details) < 3:
                logger.debug("Product line without collector/condition: %r", product_info)
                continue
            card_name = ' - '.join(details[:-2])
            collector_num = details[-2].replace('#', '', 1)
            condition, foil = _split_foil(details[-1])
            descriptions.append(
                f"{quantity}x {set_name}: {card_name} - #{collector_num} - {condition}{foil}"
            )
        else:
            # Older exports: "Set Card - #123 - Condition" with no colon
            parts = product_info.split(' - ')
            if len(parts) < 3:
                logger.debug("Product line without collector/condition: %r", product_info)
                continue
            set_and_card = ' - '.join(parts[:-2])
            collector_num = parts[-2].replace('#', '', 1)
            condition, foil = _split_foil(parts[-1])
            descriptions.append(
                f"{quantity}x {set_and_card} - #{collector_num} - {condition}{foil}"
            )

    return ', '.join(descriptions)
