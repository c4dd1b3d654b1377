"""Domain models for the net worth time series."""

from dataclasses import dataclass


@dataclass(frozen=True)
class LineItem:
    """One named account, instrument, asset or debt row.

    Attributes:
        name: Row label as found in the grid's name column.
        values: Amounts in column order; ``values[i]`` is the i-th period.
    """

    name: str
    values: tuple[float, ...]

    @property
    def latest_value(self) -> float:
        """Return the last value of the row, or 0 when it has none."""
        return self.values[-1] if self.values else 0.0


@dataclass(frozen=True)
class CategoryBlock:
    """Line items of one category plus the subtotal read from the grid."""

    items: tuple[LineItem, ...]
    subtotal: float

    def item_sum(self) -> float:
        """Return the sum of each item's latest value."""
        return sum(item.latest_value for item in self.items)


@dataclass(frozen=True)
class NetWorthEntry:
    """Complete financial snapshot for a single period.

    Attributes:
        date: Period label from the header row (e.g. ``"Apr, 2025"``).
        bank_accounts: Bank account rows and subtotal.
        investments: Investment rows and subtotal.
        other_assets: Other asset rows and subtotal.
        debt: Debt rows and subtotal (magnitudes).
        total_assets: Total assets row value.
        total_debt: Total debt row value, always non-negative.
        net_worth: Net worth row value, trusted as-is.
        month_over_month_change: Change row value when the layout has one.
        year_over_year_change: Yearly change row value when available.
    """

    date: str
    bank_accounts: CategoryBlock
    investments: CategoryBlock
    other_assets: CategoryBlock
    debt: CategoryBlock
    total_assets: float
    total_debt: float
    net_worth: float
    month_over_month_change: float | None = None
    year_over_year_change: float | None = None


@dataclass(frozen=True)
class DashboardSummary:
    """Headline figures for a series of entries."""

    current_net_worth: float
    total_growth: float
    growth_rate: float
    period: str
    currency: str


@dataclass(frozen=True)
class DashboardSeries:
    """Entries handed to the presentation layer with their summary."""

    entries: tuple[NetWorthEntry, ...]
    summary: DashboardSummary


@dataclass(frozen=True)
class ChartPoint:
    """Single (label, value) point of the net worth chart."""

    x: str
    y: float


__all__ = [
    "LineItem",
    "CategoryBlock",
    "NetWorthEntry",
    "DashboardSummary",
    "DashboardSeries",
    "ChartPoint",
]
