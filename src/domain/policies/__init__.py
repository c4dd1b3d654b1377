"""Domain policies package."""

from .investment_categories import (
    DEFAULT_CATEGORY_RULES,
    CategoryRule,
    categorize_investment,
)

__all__ = ["CategoryRule", "DEFAULT_CATEGORY_RULES", "categorize_investment"]
