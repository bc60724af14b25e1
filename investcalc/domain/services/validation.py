"""Domain validation helpers.

Inputs are never rejected here; implausible values only produce warnings.
"""

from decimal import Decimal
from logging import Logger


def validate_outstanding_debt(
    principal: Decimal,
    equity: Decimal,
    logger: Logger,
) -> None:
    """Warn when equity exceeds the credit principal.

    Args:
        principal: Credit amount.
        equity: Own capital.
        logger: Logger used for warnings.
    """
    if equity > principal:
        logger.warning(
            f"Equity {equity} exceeds principal {principal}; "
            "outstanding debt and interest are negative"
        )


def validate_base_price(name: str, price: Decimal, logger: Logger) -> None:
    """Warn when an investment has no positive price to compute yield on.

    Args:
        name: Investment name for the log message.
        price: Purchase price or start amount.
        logger: Logger used for warnings.
    """
    if price <= 0:
        logger.warning(
            f"Investment '{name}' has non-positive price {price}; "
            "yield is reported as 0"
        )


__all__ = ["validate_outstanding_debt", "validate_base_price"]
