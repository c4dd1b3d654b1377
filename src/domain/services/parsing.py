"""Currency cell parsing."""

import math
import re

from src.domain.constants import CURRENCY_STRIP_CHARS, ZERO_CURRENCY_TOKEN


# Leading numeric prefix; trailing text such as "%" or "*" is ignored.
_NUMBER_PREFIX = re.compile(r"\s*[-+]?(\d+(\.\d*)?|\.\d+)([eE][-+]?\d+)?")


def parse_amount(cell: object | None) -> float:
    """Parse a localized currency cell into an amount.

    Handles values such as ``"₹33,940"``, ``"₹2,20,000"`` and
    ``"-₹3,264,441"``. Only the leading number is read, so ``"12.5%"``
    parses as 12.5. Cells without a leading number are treated as
    missing data.

    Args:
        cell: Raw cell value; usually a string, possibly ``None``.

    Returns:
        float: Parsed amount, or 0 for empty or unparseable cells.
    """
    if cell is None:
        return 0.0
    text = str(cell)
    if text == "" or text == ZERO_CURRENCY_TOKEN:
        return 0.0
    for char in CURRENCY_STRIP_CHARS:
        text = text.replace(char, "")
    match = _NUMBER_PREFIX.match(text)
    if match is None:
        return 0.0
    amount = float(match.group(0))
    if not math.isfinite(amount):
        return 0.0
    return amount


__all__ = ["parse_amount"]
