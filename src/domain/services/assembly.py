"""Assembly of monthly net worth entries from the grid."""

from enum import Enum
from logging import Logger

from src.domain.models import (
    DEFAULT_LAYOUT,
    CategoryBlock,
    GridLayout,
    LineItem,
    NetWorthEntry,
)
from src.domain.services.extraction import (
    Grid,
    GridExtraction,
    extract_grid,
    read_amount,
    verify_layout,
)


class AssemblyMode(str, Enum):
    """How line items are attached to each entry.

    SNAPSHOT keeps only the value of the entry's own column per item.
    HISTORY attaches the full value history of every item to every entry.
    """

    SNAPSHOT = "snapshot"
    HISTORY = "history"


def assemble_entries(
    grid: Grid,
    layout: GridLayout = DEFAULT_LAYOUT,
    mode: AssemblyMode = AssemblyMode.SNAPSHOT,
    logger: Logger | None = None,
) -> list[NetWorthEntry]:
    """Build chronological net worth entries from a raw grid.

    Args:
        grid: Raw 2-D grid of string cells.
        layout: Positional schema of the grid.
        mode: Snapshot or full-history item attachment.
        logger: Optional logger for drift warnings and skipped columns.

    Returns:
        list[NetWorthEntry]: Entries in column order, one per populated
        column.
    """
    verify_layout(grid, layout, logger)
    extraction = extract_grid(grid, layout)
    return assemble_from_extraction(grid, extraction, layout, mode, logger)


def assemble_snapshot_entries(
    grid: Grid,
    layout: GridLayout = DEFAULT_LAYOUT,
    logger: Logger | None = None,
) -> list[NetWorthEntry]:
    """Return entries whose items hold only their own month's value."""
    return assemble_entries(grid, layout, AssemblyMode.SNAPSHOT, logger)


def assemble_history_entries(
    grid: Grid,
    layout: GridLayout = DEFAULT_LAYOUT,
    logger: Logger | None = None,
) -> list[NetWorthEntry]:
    """Return entries whose items carry their full value history."""
    return assemble_entries(grid, layout, AssemblyMode.HISTORY, logger)


def assemble_from_extraction(
    grid: Grid,
    extraction: GridExtraction,
    layout: GridLayout = DEFAULT_LAYOUT,
    mode: AssemblyMode = AssemblyMode.SNAPSHOT,
    logger: Logger | None = None,
) -> list[NetWorthEntry]:
    """Build entries from an existing extraction pass.

    Columns with a blank header or a non-positive net worth cell are
    treated as not yet populated and produce no entry.

    Args:
        grid: Raw grid the extraction was taken from.
        extraction: Result of ``extract_grid`` on the same grid.
        layout: Positional schema of the grid.
        mode: Snapshot or full-history item attachment.
        logger: Optional logger for skipped columns.

    Returns:
        list[NetWorthEntry]: Entries in column order.
    """
    entries: list[NetWorthEntry] = []
    for index, date in enumerate(extraction.dates):
        if not date:
            continue
        column = layout.data_start_column + index
        net_worth = read_amount(grid, layout.net_worth_row, column)
        if net_worth <= 0:
            if logger is not None:
                logger.debug(
                    f"Skipping column {column} ({date}): "
                    f"net worth {net_worth} is not positive"
                )
            continue

        def _block(items, subtotal_row, absolute=False):
            subtotal = read_amount(grid, subtotal_row, column)
            return CategoryBlock(
                items=_attach(items, index, mode),
                subtotal=abs(subtotal) if absolute else subtotal,
            )

        entries.append(
            NetWorthEntry(
                date=date,
                bank_accounts=_block(
                    extraction.bank_accounts,
                    layout.bank_subtotal_row,
                ),
                investments=_block(
                    extraction.investments,
                    layout.investment_subtotal_row,
                ),
                other_assets=_block(
                    extraction.other_assets,
                    layout.other_assets_subtotal_row,
                ),
                debt=_block(
                    extraction.debts,
                    layout.debt_subtotal_row,
                    absolute=True,
                ),
                total_assets=read_amount(grid, layout.total_assets_row, column),
                total_debt=abs(read_amount(grid, layout.total_debt_row, column)),
                net_worth=net_worth,
                month_over_month_change=_optional_amount(
                    grid, layout.month_change_row, column
                ),
                year_over_year_change=_optional_amount(
                    grid, layout.year_change_row, column
                ),
            )
        )

    if logger is not None:
        logger.info(
            f"Assembled {len(entries)} entries from "
            f"{len(extraction.dates)} date columns ({mode.value} mode)"
        )
    return entries


def _attach(
    items: tuple[LineItem, ...],
    index: int,
    mode: AssemblyMode,
) -> tuple[LineItem, ...]:
    if mode is AssemblyMode.HISTORY:
        return items
    return tuple(
        LineItem(name=item.name, values=(item.values[index],))
        for item in items
    )


def _optional_amount(grid: Grid, row: int | None, column: int) -> float | None:
    if row is None:
        return None
    return read_amount(grid, row, column)


__all__ = [
    "AssemblyMode",
    "assemble_entries",
    "assemble_snapshot_entries",
    "assemble_history_entries",
    "assemble_from_extraction",
]
