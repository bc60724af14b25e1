"""Country profile provider reading bundled JSON files."""

import json
import re
from pathlib import Path

from investcalc.application.ports.configuration import (
    CountryProfileProviderPort,
)
from investcalc.domain.constants import DEFAULT_COUNTRY
from investcalc.domain.models import (
    Compounding,
    CostEffect,
    CostItemDefaults,
    CostMode,
    CountryProfile,
    CreditDefaults,
    DepositDefaults,
    RealEstateDefaults,
    RunningCostRates,
    StockDefaults,
)
from investcalc.infrastructure.logging.logger import get_app_logger
from investcalc.infrastructure.serialization import house_fee_from_dict
from investcalc.utils.decimal_utils import coerce_decimal

PROFILES_DIR = Path(__file__).resolve().parents[1] / "data" / "profiles"

_PROFILE_CODE = re.compile(r"[a-z]+")


def normalize_country_code(code: str | None) -> str | None:
    """Normalize a country profile code.

    Codes name profile files, so only ASCII letters are accepted.

    Args:
        code: Raw country code (e.g. ``DE``).

    Returns:
        str | None: Lower-case code, or None when empty or malformed.
    """
    if not code:
        return None
    cleaned = code.strip().lower()
    return cleaned if _PROFILE_CODE.fullmatch(cleaned) else None


def _item_defaults(data: dict) -> CostItemDefaults:
    return CostItemDefaults(
        enabled=bool(data.get("enabled", False)),
        value=coerce_decimal(data.get("value")),
        mode=CostMode(data.get("mode", CostMode.PERCENT)),
        allow_mode_change=bool(data.get("allowModeChange", True)),
        label=data.get("label", ""),
        effect=CostEffect(data.get("effect", CostEffect.ADD)),
    )


def _section(data: dict | None) -> dict[str, CostItemDefaults]:
    return {key: _item_defaults(item) for key, item in (data or {}).items()}


def parse_profile(data: dict) -> CountryProfile:
    """Parse a profile mapping into a CountryProfile.

    Args:
        data: Mapping as stored in a profile JSON file.

    Returns:
        CountryProfile: Parsed profile.
    """
    real_estate = data.get("realEstate", {})
    rates = real_estate.get("runningCostRates", {})
    deposit = data.get("deposit", {})
    stock = data.get("stock", {})
    credit = data.get("credit", {})
    return CountryProfile(
        code=data["code"],
        currency=data.get("currency", "EUR"),
        real_estate=RealEstateDefaults(
            purchase_costs=_section(real_estate.get("purchaseCosts")),
            additional_costs=_section(real_estate.get("additionalCosts")),
            rent_taxes=_section(real_estate.get("rentTaxes")),
            running_cost_rates=RunningCostRates(
                apportionable_pct=coerce_decimal(
                    rates.get("apportionablePct")
                ),
                non_apportionable_pct=coerce_decimal(
                    rates.get("nonApportionablePct")
                ),
            ),
            house_fee=house_fee_from_dict(real_estate.get("houseFee")),
            other_running_costs=_section(
                real_estate.get("otherRunningCosts")
            ),
        ),
        deposit=DepositDefaults(
            start_amount=coerce_decimal(deposit.get("startAmount")),
            term_months=int(deposit.get("termMonths", 12)),
            rate_nominal=coerce_decimal(deposit.get("rateNominal")),
            compounding=Compounding(
                deposit.get("compounding", Compounding.YEARLY)
            ),
            tax_free_allowance=coerce_decimal(
                deposit.get("taxFreeAllowance")
            ),
            taxes=_section(deposit.get("taxes")),
            fees=_section(deposit.get("fees")),
        ),
        stock=StockDefaults(
            tax_free_allowance=coerce_decimal(stock.get("taxFreeAllowance")),
            selling_costs=coerce_decimal(stock.get("sellingCosts")),
            costs=_section(stock.get("costs")),
            taxes=_section(stock.get("taxes")),
        ),
        credit=CreditDefaults(
            rate_annual_pct=coerce_decimal(credit.get("rateAnnualPct")),
            repayment_initial_pct=coerce_decimal(
                credit.get("repaymentInitialPct")
            ),
            term_months=int(credit.get("termMonths", 120)),
        ),
    )


class JsonCountryProfileProvider(CountryProfileProviderPort):
    """Load country profiles from ``<code>.json`` files.

    Parsed profiles are cached per code for the provider's lifetime.
    """

    def __init__(self, profiles_dir: Path | None = None, logger=None) -> None:
        """Initialize the provider.

        Args:
            profiles_dir: Directory holding the profile files.
            logger: Optional logger compatible with logging.Logger-like API.
        """
        self._profiles_dir = Path(profiles_dir or PROFILES_DIR)
        self._logger = logger or get_app_logger()
        self._cache: dict[str, CountryProfile] = {}

    def available_codes(self) -> list[str]:
        return sorted(path.stem for path in self._profiles_dir.glob("*.json"))

    def get_profile(self, code: str) -> CountryProfile:
        """Return the profile for a code, falling back to the default.

        Args:
            code: Country code, case-insensitive.

        Returns:
            CountryProfile: Requested profile, or the default country's
            profile when the code is unknown.

        Raises:
            RuntimeError: If the default profile file is missing.
        """
        normalized = normalize_country_code(code)
        if normalized not in self.available_codes():
            self._logger.warning(
                f"Unknown country profile '{code}', "
                f"using '{DEFAULT_COUNTRY}'"
            )
            normalized = DEFAULT_COUNTRY
        if normalized not in self._cache:
            self._cache[normalized] = self._load(normalized)
        return self._cache[normalized]

    def _load(self, code: str) -> CountryProfile:
        path = self._profiles_dir / f"{code}.json"
        if not path.exists():
            raise RuntimeError(f"Missing country profile file: {path}")
        with path.open(encoding="utf-8") as handle:
            data = json.load(handle)
        self._logger.info(f"Loaded country profile '{code}' from {path}")
        return parse_profile(data)


__all__ = [
    "PROFILES_DIR",
    "JsonCountryProfileProvider",
    "normalize_country_code",
    "parse_profile",
]
