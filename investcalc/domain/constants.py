"""Domain constants for investment calculations."""

DEFAULT_COUNTRY = "de"

SUPPORTED_COUNTRIES = (
    "de",
    "cz",
    "ch",
    "custom",
)

ID_PREFIXES = {
    "OBJECT": "obj",
    "REAL_ESTATE": "re",
    "FIXED_TERM_DEPOSIT": "dep",
    "STOCK": "stk",
    "CREDIT": "cr",
    "CASHFLOW": "cf",
}


__all__ = ["DEFAULT_COUNTRY", "SUPPORTED_COUNTRIES", "ID_PREFIXES"]
