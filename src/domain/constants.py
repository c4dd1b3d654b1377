"""Domain constants for net worth analytics."""

DEFAULT_CURRENCY = "INR"

# Literal the source sheet uses for an empty currency cell.
ZERO_CURRENCY_TOKEN = "₹0"

# Characters stripped from a currency cell before numeric parsing.
CURRENCY_STRIP_CHARS = ("₹", ",", '"')

ALL_PERIODS = "all"
PERIOD_WINDOWS = {
    "1month": 1,
    "3months": 3,
    "6months": 6,
}

BANK_ACCOUNTS_LABEL = "Bank Accounts"
INVESTMENTS_LABEL = "Investments"
OTHER_ASSETS_LABEL = "Other Assets"

# (lower, upper, points) bands of the allocation score, in percent.
ALLOCATION_SCORE_BANDS = {
    "investments": (30.0, 70.0, 40),
    "bank_accounts": (5.0, 30.0, 30),
    "other_assets": (20.0, 60.0, 30),
}

# Descending (minimum score, feedback) thresholds.
ALLOCATION_FEEDBACK = (
    (80, "Excellent asset allocation balance"),
    (60, "Good diversification with room for optimization"),
    (40, "Consider rebalancing your portfolio"),
    (0, "Review allocation strategy for better diversification"),
)

# Debt-to-asset ratio thresholds, in percent.
DEBT_RISK_LOW_BELOW = 20.0
DEBT_RISK_MEDIUM_BELOW = 40.0

# Monthly return standard deviation treated as the consistency ceiling.
CONSISTENCY_STDDEV_CEILING = 20.0
RISK_LOW_MAX_STDDEV = 5.0
RISK_MEDIUM_MAX_STDDEV = 15.0

TREND_WINDOW = 3
TREND_UP_ABOVE = 5.0
TREND_DOWN_BELOW = -2.0

RISK_WEIGHTS = {"low": 1, "medium": 2, "high": 3}

SUBTOTAL_TOLERANCE = 1.0


__all__ = [
    "DEFAULT_CURRENCY",
    "ZERO_CURRENCY_TOKEN",
    "CURRENCY_STRIP_CHARS",
    "ALL_PERIODS",
    "PERIOD_WINDOWS",
    "BANK_ACCOUNTS_LABEL",
    "INVESTMENTS_LABEL",
    "OTHER_ASSETS_LABEL",
    "ALLOCATION_SCORE_BANDS",
    "ALLOCATION_FEEDBACK",
    "DEBT_RISK_LOW_BELOW",
    "DEBT_RISK_MEDIUM_BELOW",
    "CONSISTENCY_STDDEV_CEILING",
    "RISK_LOW_MAX_STDDEV",
    "RISK_MEDIUM_MAX_STDDEV",
    "TREND_WINDOW",
    "TREND_UP_ABOVE",
    "TREND_DOWN_BELOW",
    "RISK_WEIGHTS",
    "SUBTOTAL_TOLERANCE",
]
