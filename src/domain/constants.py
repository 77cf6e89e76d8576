"""Domain constants for wealth tracking."""

SUPPORTED_CURRENCIES = ("USD", "EUR", "GBP", "JPY", "INR")

DEFAULT_BASE_CURRENCY = "USD"

CURRENCY_SYMBOLS = {
    "USD": "$",
    "EUR": "€",
    "GBP": "£",
    "JPY": "¥",
    "INR": "₹",
}

MONTH_NAMES = (
    "Jan",
    "Feb",
    "Mar",
    "Apr",
    "May",
    "Jun",
    "Jul",
    "Aug",
    "Sep",
    "Oct",
    "Nov",
    "Dec",
)


__all__ = [
    "SUPPORTED_CURRENCIES",
    "DEFAULT_BASE_CURRENCY",
    "CURRENCY_SYMBOLS",
    "MONTH_NAMES",
]
