"""User-facing descriptions of grid source failures."""


_KEYWORD_MESSAGES = (
    (
        "API key",
        "Invalid API key. Please check your Google Sheets API configuration.",
    ),
    (
        "spreadsheet",
        "Spreadsheet not found. Please check the spreadsheet ID.",
    ),
    (
        "range",
        "Invalid range specified. Please check the sheet name and range.",
    ),
    ("quota", "API quota exceeded. Please try again later."),
)

UNKNOWN_ERROR_MESSAGE = "An unknown error occurred while fetching data."


def describe_grid_error(error: BaseException | None) -> str:
    """Map a fetch or extraction failure to a user-facing message.

    Args:
        error: Exception raised while fetching or reading the grid.

    Returns:
        str: A tailored message for known failure kinds, otherwise the
        exception message or a generic fallback.
    """
    message = str(error) if error is not None else ""
    for keyword, description in _KEYWORD_MESSAGES:
        if keyword in message:
            return description
    return message or UNKNOWN_ERROR_MESSAGE


__all__ = ["describe_grid_error", "UNKNOWN_ERROR_MESSAGE"]
