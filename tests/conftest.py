"""Shared fixtures building raw net worth grids."""

import pytest

from src.domain.models import (
    DEFAULT_LAYOUT,
    CategoryBlock,
    LineItem,
    NetWorthEntry,
)


def _money(value) -> str:
    if value is None:
        return ""
    sign = "-" if value < 0 else ""
    return f"{sign}₹{abs(value):,}"


def build_grid(
    dates,
    bank_accounts=None,
    investments=None,
    other_assets=None,
    debts=None,
    net_worth=None,
    month_changes=None,
    layout=DEFAULT_LAYOUT,
):
    """Return a grid of strings laid out like the tracker spreadsheet.

    Category arguments map row names to per-column values. Subtotals and
    totals are derived from them; debts are written as negative cells.
    """
    width = layout.data_end_column + 1
    height = max(layout.net_worth_row, layout.month_change_row or 0) + 1
    grid = [[""] * width for _ in range(height)]
    columns = [layout.data_start_column + offset for offset in range(len(dates))]
    for column, date in zip(columns, dates):
        grid[layout.date_header_row][column] = date

    def _fill(row_range, subtotal_row, items, sign=1):
        totals = [0] * len(dates)
        for row, (name, values) in zip(row_range.rows(), (items or {}).items()):
            grid[row][layout.name_column] = name
            for offset, value in enumerate(values):
                grid[row][columns[offset]] = _money(sign * value)
                totals[offset] += value
        for column, total in zip(columns, totals):
            grid[subtotal_row][column] = _money(sign * total)
        return totals

    bank = _fill(layout.bank_accounts, layout.bank_subtotal_row, bank_accounts)
    invest = _fill(
        layout.investments, layout.investment_subtotal_row, investments
    )
    other = _fill(
        layout.other_assets, layout.other_assets_subtotal_row, other_assets
    )
    debt = _fill(layout.debt, layout.debt_subtotal_row, debts, sign=-1)

    for offset, column in enumerate(columns):
        assets = bank[offset] + invest[offset] + other[offset]
        grid[layout.total_assets_row][column] = _money(assets)
        grid[layout.total_debt_row][column] = _money(-debt[offset])
        worth = (
            net_worth[offset] if net_worth is not None
            else assets - debt[offset]
        )
        grid[layout.net_worth_row][column] = _money(worth)
        if month_changes is not None and layout.month_change_row is not None:
            grid[layout.month_change_row][column] = str(month_changes[offset])
    return grid


def make_entry(
    date="Jan, 2025",
    net_worth=100.0,
    bank=0.0,
    investments=0.0,
    other_assets=0.0,
    total_debt=0.0,
    month_change=None,
    investment_items=(),
):
    """Return a snapshot entry with the given subtotals."""
    return NetWorthEntry(
        date=date,
        bank_accounts=CategoryBlock(items=(), subtotal=bank),
        investments=CategoryBlock(
            items=tuple(investment_items),
            subtotal=investments,
        ),
        other_assets=CategoryBlock(items=(), subtotal=other_assets),
        debt=CategoryBlock(items=(), subtotal=total_debt),
        total_assets=bank + investments + other_assets,
        total_debt=total_debt,
        net_worth=net_worth,
        month_over_month_change=month_change,
    )


@pytest.fixture
def grid_builder():
    """Return the grid builder helper."""
    return build_grid


@pytest.fixture
def entry_factory():
    """Return the entry builder helper."""
    return make_entry


@pytest.fixture
def sample_grid():
    """Three populated months followed by an empty column."""
    return build_grid(
        dates=["Jan, 2025", "Feb, 2025", "Mar, 2025", "Apr, 2025"],
        bank_accounts={
            "HDFC Savings": [100000, 110000, 120000, 0],
            "SBI Salary": [50000, 40000, 30000, 0],
        },
        investments={
            "Equity Mutual Fund": [400000, 420000, 460000, 0],
            "EPF": [300000, 303000, 306000, 0],
        },
        other_assets={"Gold": [200000, 200000, 210000, 0]},
        debts={"Home Loan": [250000, 240000, 230000, 0]},
        month_changes=[0, 3.5, 4.1, 0],
    )
