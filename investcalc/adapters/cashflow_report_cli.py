"""CLI adapter printing the cashflow overview.

This module wires the GetCashflowOverviewUseCase to the configured stores
and prints each enriched cashflow followed by the totals.
"""

import argparse
from dataclasses import replace

from investcalc.domain.services.fx import normalize_currency_code
from investcalc.infrastructure.container import build_services, build_settings
from investcalc.infrastructure.logging.logger import get_app_logger


def _parse_args(argv: list[str] | None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Print stored cashflows in the display currency.",
    )
    parser.add_argument(
        "--currency",
        help="Display currency code, or NONE to disable conversion.",
    )
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> None:
    """Print enriched cashflows and their totals."""
    args = _parse_args(argv)
    logger = get_app_logger()
    settings = build_settings()
    currency = normalize_currency_code(args.currency)
    if currency:
        settings = replace(settings, main_currency=currency)
    services = build_services(settings)
    overview = services.overview.execute()
    logger.info(
        f"Cashflow report for {len(overview.items)} cashflows "
        f"(currency={settings.main_currency})"
    )

    if not overview.items:
        print("No cashflows stored.")
        return
    for item in overview.items:
        print(
            f"{item.name}: investment={item.investment_name}, "
            f"credit={item.credit_name}, "
            f"monthly={item.display_cashflow_monthly}, "
            f"yearly={item.display_cashflow_yearly}, "
            f"yield={item.yield_pct}%"
        )
    totals = overview.totals
    print(
        f"Total ({totals.currency or 'original currencies'}): "
        f"monthly={totals.monthly}, yearly={totals.yearly}, "
        f"positive={totals.positive_count}, "
        f"negative={totals.negative_count}"
    )


if __name__ == "__main__":  # pragma: no cover
    main()
