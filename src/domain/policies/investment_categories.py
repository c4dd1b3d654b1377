"""Name-based asset class rules for investments.

The rules are a best-effort heuristic: they match substrings of the
instrument name and are not an authoritative classification.
"""

from collections.abc import Sequence
from dataclasses import dataclass

from src.domain.models import AssetClass


@dataclass(frozen=True)
class CategoryRule:
    """Map names containing ``substring`` to ``asset_class``."""

    substring: str
    asset_class: AssetClass


# Evaluated in order; the first matching rule wins.
DEFAULT_CATEGORY_RULES: tuple[CategoryRule, ...] = (
    CategoryRule("equity", AssetClass.EQUITY),
    CategoryRule("shares", AssetClass.EQUITY),
    CategoryRule("stock", AssetClass.EQUITY),
    CategoryRule("fd", AssetClass.DEBT),
    CategoryRule("epf", AssetClass.DEBT),
    CategoryRule("nps", AssetClass.DEBT),
    CategoryRule("fixed", AssetClass.DEBT),
    CategoryRule("gold", AssetClass.ALTERNATIVE),
    CategoryRule("real estate", AssetClass.ALTERNATIVE),
    CategoryRule("land", AssetClass.ALTERNATIVE),
    CategoryRule("mutual", AssetClass.HYBRID),
    CategoryRule("fund", AssetClass.HYBRID),
)


def categorize_investment(
    name: str,
    rules: Sequence[CategoryRule] = DEFAULT_CATEGORY_RULES,
    default: AssetClass = AssetClass.HYBRID,
) -> AssetClass:
    """Return the asset class of an investment from its name.

    Args:
        name: Investment name as found in the grid.
        rules: Ordered rules; matching is case-insensitive.
        default: Asset class for names no rule matches.

    Returns:
        AssetClass: Class of the first matching rule, else ``default``.
    """
    lowered = name.lower()
    for rule in rules:
        if rule.substring.lower() in lowered:
            return rule.asset_class
    return default


__all__ = ["CategoryRule", "DEFAULT_CATEGORY_RULES", "categorize_investment"]
