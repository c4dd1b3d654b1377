"""Tests for currency cell parsing."""

import pytest

from src.domain.services.parsing import parse_amount


@pytest.mark.parametrize("cell", ["", None, "₹0"])
def test_parse_amount_treats_empty_cells_as_zero(cell) -> None:
    """Empty cells and the zero token should parse to 0."""
    assert parse_amount(cell) == 0


def test_parse_amount_handles_indian_grouping() -> None:
    """Lakh-style digit grouping should be stripped."""
    assert parse_amount("₹2,20,000") == 220000
    assert parse_amount("₹33,940") == 33940


def test_parse_amount_keeps_sign() -> None:
    """Negative amounts should stay negative."""
    assert parse_amount("-₹3,264,441") == -3264441


def test_parse_amount_strips_quotes_and_whitespace() -> None:
    """Quoted CSV exports and padding should not break parsing."""
    assert parse_amount('" ₹1,250.50 "') == pytest.approx(1250.5)


@pytest.mark.parametrize("cell", ["n/a", "#REF!", "₹", "nan", "inf"])
def test_parse_amount_absorbs_malformed_cells(cell) -> None:
    """Unparseable or non-finite cells should read as missing data."""
    assert parse_amount(cell) == 0


def test_parse_amount_accepts_numbers() -> None:
    """Numeric cells should pass through."""
    assert parse_amount(42) == 42


@pytest.mark.parametrize(
    ("cell", "expected"),
    [
        ("12.5%", 12.5),
        ("₹2,000*", 2000),
        ("₹1,000.50 approx", 1000.5),
        ("-3.2% MoM", -3.2),
        (".5", 0.5),
    ],
)
def test_parse_amount_reads_leading_number(cell, expected) -> None:
    """Trailing annotations after the number should be ignored."""
    assert parse_amount(cell) == pytest.approx(expected)


def test_parse_amount_rejects_overflowing_exponent() -> None:
    """Numbers that overflow to infinity read as missing data."""
    assert parse_amount("1e999") == 0
