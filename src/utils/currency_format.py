"""Compact currency formatting for text output."""

CRORE = 10_000_000
LAKH = 100_000
THOUSAND = 1_000


def format_currency_short(amount: float, symbol: str = "₹") -> str:
    """Format an amount using crore, lakh and thousand suffixes.

    Args:
        amount: Amount in whole currency units.
        symbol: Currency symbol prefix.

    Returns:
        str: e.g. ``₹1.2Cr``, ``₹5.3L``, ``₹34K`` or ``₹950``.
    """
    if amount >= CRORE:
        return f"{symbol}{amount / CRORE:.1f}Cr"
    if amount >= LAKH:
        return f"{symbol}{amount / LAKH:.1f}L"
    if amount >= THOUSAND:
        return f"{symbol}{amount / THOUSAND:.0f}K"
    return f"{symbol}{amount:.0f}"


__all__ = ["format_currency_short"]
