"""Positional extraction of line items from the net worth grid."""

from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from logging import Logger

from src.domain.models import GridLayout, LayoutAnchor, LineItem
from src.domain.services.parsing import parse_amount


Grid = Sequence[Sequence[object]]


@dataclass(frozen=True)
class GridExtraction:
    """Result of the single extraction pass shared by all assembly modes.

    Attributes:
        dates: Header labels of the data columns, ``""`` when blank.
        bank_accounts: Bank account rows with full value history.
        investments: Investment rows with full value history.
        other_assets: Other asset rows with full value history.
        debts: Debt rows with full value history, as magnitudes.
    """

    dates: tuple[str, ...]
    bank_accounts: tuple[LineItem, ...]
    investments: tuple[LineItem, ...]
    other_assets: tuple[LineItem, ...]
    debts: tuple[LineItem, ...]


def read_cell(grid: Grid, row: int, column: int) -> object | None:
    """Return the cell at ``(row, column)`` or None when out of range."""
    if row < 0 or row >= len(grid):
        return None
    cells = grid[row]
    if cells is None or column < 0 or column >= len(cells):
        return None
    return cells[column]


def read_amount(grid: Grid, row: int | None, column: int) -> float:
    """Parse the cell at ``(row, column)``; missing rows read as 0."""
    if row is None:
        return 0.0
    return parse_amount(read_cell(grid, row, column))


def read_date_headers(grid: Grid, layout: GridLayout) -> tuple[str, ...]:
    """Return header labels sliced to the layout's data columns.

    A header row shorter than the data range yields fewer columns, in the
    same way a truncated spreadsheet export does. Labels are trimmed, but
    only an empty cell reads as blank: a whitespace-only header keeps its
    raw text so the column is still judged by its net worth.
    """
    if layout.date_header_row >= len(grid):
        return ()
    header = grid[layout.date_header_row] or ()
    sliced = header[layout.data_start_column:layout.data_end_column + 1]
    return tuple(_header_label(cell) for cell in sliced)


def _header_label(cell: object | None) -> str:
    if cell is None:
        return ""
    text = str(cell)
    return text.strip() or text


def extract_line_items(
    grid: Grid,
    rows: Iterable[int],
    name_column: int,
    data_columns: Sequence[int],
    *,
    absolute: bool = False,
) -> tuple[LineItem, ...]:
    """Extract named rows and their per-column amounts.

    Args:
        grid: Raw 2-D grid of string cells.
        rows: Row indices of the category's item rows.
        name_column: Column holding the row label.
        data_columns: Data column indices, in chronological order.
        absolute: Store magnitudes instead of signed amounts (debts).

    Returns:
        tuple[LineItem, ...]: Rows with a label and at least one strictly
        positive value, in row order.
    """
    items: list[LineItem] = []
    for row in rows:
        name = read_cell(grid, row, name_column)
        if name is None or not str(name).strip():
            continue
        values = []
        for column in data_columns:
            amount = parse_amount(read_cell(grid, row, column))
            values.append(abs(amount) if absolute else amount)
        if not any(value > 0 for value in values):
            continue
        items.append(LineItem(name=str(name).strip(), values=tuple(values)))
    return tuple(items)


def extract_grid(grid: Grid, layout: GridLayout) -> GridExtraction:
    """Run the extraction pass for every category of the layout.

    Args:
        grid: Raw 2-D grid of string cells.
        layout: Positional schema of the grid.

    Returns:
        GridExtraction: Date headers and full-history line items.
    """
    dates = read_date_headers(grid, layout)
    columns = [layout.data_start_column + offset for offset in range(len(dates))]

    def _extract(row_range, absolute=False):
        return extract_line_items(
            grid,
            row_range.rows(),
            layout.name_column,
            columns,
            absolute=absolute,
        )

    return GridExtraction(
        dates=dates,
        bank_accounts=_extract(layout.bank_accounts),
        investments=_extract(layout.investments),
        other_assets=_extract(layout.other_assets),
        debts=_extract(layout.debt, absolute=True),
    )


def verify_layout(
    grid: Grid,
    layout: GridLayout,
    logger: Logger | None = None,
) -> list[LayoutAnchor]:
    """Return the layout anchors whose label is not found in the grid.

    Args:
        grid: Raw 2-D grid of string cells.
        layout: Layout whose anchors are checked.
        logger: Optional logger used to warn about each mismatch.

    Returns:
        list[LayoutAnchor]: Anchors that do not match, in layout order.
    """
    mismatches: list[LayoutAnchor] = []
    for anchor in layout.anchors:
        cell = read_cell(grid, anchor.row, anchor.column)
        found = "" if cell is None else str(cell).strip()
        if found.casefold() == anchor.label.strip().casefold():
            continue
        mismatches.append(anchor)
        if logger is not None:
            logger.warning(
                f"Grid layout drift at row={anchor.row}, "
                f"column={anchor.column}: expected '{anchor.label}', "
                f"found '{found}'"
            )
    return mismatches


__all__ = [
    "Grid",
    "GridExtraction",
    "read_cell",
    "read_amount",
    "read_date_headers",
    "extract_line_items",
    "extract_grid",
    "verify_layout",
]
