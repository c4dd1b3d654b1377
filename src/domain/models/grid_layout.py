"""Positional schema of the net worth grid.

All offsets are 0-indexed. The layout is configuration: retargeting the
engine to another spreadsheet only requires a different ``GridLayout``.
"""

from collections.abc import Mapping
from dataclasses import dataclass, fields


@dataclass(frozen=True)
class RowRange:
    """Inclusive range of item rows for one category."""

    start: int
    end: int

    def rows(self) -> range:
        return range(self.start, self.end + 1)


@dataclass(frozen=True)
class LayoutAnchor:
    """Label expected at a fixed cell, used to detect layout drift."""

    row: int
    column: int
    label: str


@dataclass(frozen=True)
class GridLayout:
    """Row and column offsets of every semantic region of the grid."""

    date_header_row: int
    name_column: int
    data_start_column: int
    data_end_column: int
    bank_accounts: RowRange
    bank_subtotal_row: int
    investments: RowRange
    investment_subtotal_row: int
    other_assets: RowRange
    other_assets_subtotal_row: int
    debt: RowRange
    debt_subtotal_row: int
    total_assets_row: int
    total_debt_row: int
    net_worth_row: int
    month_change_row: int | None = None
    year_change_row: int | None = None
    anchors: tuple[LayoutAnchor, ...] = ()

    @property
    def data_columns(self) -> range:
        return range(self.data_start_column, self.data_end_column + 1)

    def to_mapping(self) -> dict[str, object]:
        """Flatten the layout into a ``{semantic name: index}`` mapping."""
        mapping: dict[str, object] = {}
        for item in fields(self):
            value = getattr(self, item.name)
            if isinstance(value, RowRange):
                mapping[f"{item.name}_start"] = value.start
                mapping[f"{item.name}_end"] = value.end
            elif item.name == "anchors":
                mapping["anchors"] = [
                    {"row": a.row, "column": a.column, "label": a.label}
                    for a in value
                ]
            else:
                mapping[item.name] = value
        return mapping

    @classmethod
    def from_mapping(
        cls,
        mapping: Mapping[str, object],
        base: "GridLayout | None" = None,
    ) -> "GridLayout":
        """Build a layout from a flat mapping, filling gaps from ``base``.

        Args:
            mapping: Semantic names (as produced by ``to_mapping``) to
                indices. Unknown keys are rejected.
            base: Layout providing values for keys absent from ``mapping``.

        Returns:
            GridLayout: The resulting layout.

        Raises:
            ValueError: If the mapping contains unknown keys, misses keys
                that ``base`` cannot provide, or holds values that are not
                indices or anchor objects.
        """
        merged: dict[str, object] = dict(base.to_mapping()) if base else {}
        unknown = set(mapping) - _known_keys()
        if unknown:
            raise ValueError(
                f"Unknown grid layout keys: {', '.join(sorted(unknown))}"
            )
        merged.update(mapping)
        missing = _known_keys() - set(merged) - _optional_keys()
        if missing:
            raise ValueError(
                f"Missing grid layout keys: {', '.join(sorted(missing))}"
            )

        kwargs: dict[str, object] = {}
        try:
            for item in fields(cls):
                if item.name == "anchors":
                    kwargs["anchors"] = tuple(
                        LayoutAnchor(
                            row=int(raw["row"]),
                            column=int(raw["column"]),
                            label=str(raw["label"]),
                        )
                        for raw in merged.get("anchors") or ()
                    )
                elif item.name in _RANGE_FIELDS:
                    kwargs[item.name] = RowRange(
                        start=int(merged[f"{item.name}_start"]),
                        end=int(merged[f"{item.name}_end"]),
                    )
                else:
                    value = merged.get(item.name)
                    if value is None and item.name not in _optional_keys():
                        raise ValueError(f"{item.name} must be an index")
                    kwargs[item.name] = None if value is None else int(value)
        except (KeyError, TypeError, ValueError) as exc:
            raise ValueError(f"Invalid grid layout: {exc!r}") from exc
        return cls(**kwargs)


_RANGE_FIELDS = ("bank_accounts", "investments", "other_assets", "debt")


def _optional_keys() -> set[str]:
    return {"month_change_row", "year_change_row", "anchors"}


def _known_keys() -> set[str]:
    keys: set[str] = set()
    for item in fields(GridLayout):
        if item.name in _RANGE_FIELDS:
            keys.update({f"{item.name}_start", f"{item.name}_end"})
        else:
            keys.add(item.name)
    return keys


DEFAULT_LAYOUT = GridLayout(
    date_header_row=2,
    name_column=2,
    data_start_column=3,
    data_end_column=26,
    bank_accounts=RowRange(6, 9),
    bank_subtotal_row=17,
    investments=RowRange(21, 28),
    investment_subtotal_row=35,
    other_assets=RowRange(39, 41),
    other_assets_subtotal_row=50,
    debt=RowRange(54, 55),
    debt_subtotal_row=65,
    total_assets_row=67,
    total_debt_row=68,
    net_worth_row=69,
    month_change_row=70,
)


__all__ = ["RowRange", "LayoutAnchor", "GridLayout", "DEFAULT_LAYOUT"]
