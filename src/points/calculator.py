import logging
import math
import re
from typing import Callable, Dict, Optional

from src.model.ReceiptModel import Receipt

logger = logging.getLogger(__name__)

ALPHANUMERIC = frozenset("abcdefghijklmnopqrstuvwxyzABCDEFGHIJKLMNOPQRSTUVWXYZ0123456789")

# ASCII digits only, no surrounding whitespace or "_" separators
AMOUNT_PATTERN = re.compile(r'[+-]?(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?')
INT_PATTERN = re.compile(r'[+-]?[0-9]+')


def parse_amount(text: str) -> Optional[float]:
    if not AMOUNT_PATTERN.fullmatch(text):
        logger.debug("Skipping unparsable amount %r", text)
        return None
    value = float(text)
    if not math.isfinite(value):
        logger.debug("Skipping non-finite amount %r", text)
        return None
    return value


def parse_int_part(text: str, sep: str, index: int) -> Optional[int]:
    """Return the integer at position ``index`` of ``text`` split on ``sep``."""
    parts = text.split(sep)
    if len(parts) <= index:
        logger.debug("Skipping %r: no component %d", text, index)
        return None
    if not INT_PATTERN.fullmatch(parts[index]):
        logger.debug("Skipping %r: component %r is not an integer", text, parts[index])
        return None
    return int(parts[index])


def retailer_points(receipt: Receipt) -> int:
    return sum(1 for char in receipt.retailer if char in ALPHANUMERIC)


def round_dollar_points(receipt: Receipt) -> int:
    return 50 if receipt.total.endswith(".00") else 0


def quarter_multiple_points(receipt: Receipt) -> int:
    total = parse_amount(receipt.total)
    if total is None:
        return 0
    # remainder must be exactly zero on the float value
    return 25 if math.fmod(total, 0.25) == 0 else 0


def item_pair_points(receipt: Receipt) -> int:
    return (len(receipt.items) // 2) * 5


def description_points(receipt: Receipt) -> int:
    points = 0
    for item in receipt.items:
        if len(item.description.strip()) % 3 != 0:
            continue
        price = parse_amount(item.price)
        if price is None:
            continue
        points += math.ceil(price * 0.2)
    return points


def odd_day_points(receipt: Receipt) -> int:
    day = parse_int_part(receipt.purchase_date, "-", 2)
    if day is None:
        return 0
    return 6 if day % 2 != 0 else 0


def afternoon_points(receipt: Receipt) -> int:
    hour = parse_int_part(receipt.purchase_time, ":", 0)
    if hour is None:
        return 0
    # 2:00pm up to, not including, 4:00pm
    return 10 if 14 <= hour < 16 else 0


RULES: Dict[str, Callable[[Receipt], int]] = {
    "retailer": retailer_points,
    "round_dollar": round_dollar_points,
    "quarter_multiple": quarter_multiple_points,
    "item_pairs": item_pair_points,
    "descriptions": description_points,
    "odd_day": odd_day_points,
    "afternoon": afternoon_points,
}


def points_breakdown(receipt: Receipt) -> Dict[str, int]:
    return {name: rule(receipt) for name, rule in RULES.items()}


def calculate_points(receipt: Receipt) -> int:
    """Score a receipt by summing every rule.

    Sub-fields that fail to parse (total, item prices, purchase date or time)
    contribute nothing to their own rule and never abort the calculation.
    """
    return sum(points_breakdown(receipt).values())
