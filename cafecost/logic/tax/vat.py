"""VAT and income-tax estimate.

Amounts are either VAT-inclusive (the tax is already inside) or exclusive
(supply price only). Results are reference figures; the actual filing depends
on the business and taxation type.
"""
from __future__ import annotations
from dataclasses import asdict, dataclass
from typing import Any, Dict

from cafecost.utilities import config
from cafecost.utilities.constants import PERIOD_MULTIPLIER
from cafecost.utilities.numbers import safe_parse

__all__ = ["supply_price", "vat_amount", "TaxEstimate", "estimate_tax"]


def _rate(vat_rate_percent: Any) -> float:
    return max(0.0, safe_parse(vat_rate_percent)) / 100


def supply_price(amount: Any, mode: str, vat_rate_percent: Any = config.DEFAULT_VAT_RATE_PERCENT) -> float:
    a = safe_parse(amount)
    if mode == "inclusive":
        return a / (1 + _rate(vat_rate_percent))
    return a


def vat_amount(amount: Any, mode: str, vat_rate_percent: Any = config.DEFAULT_VAT_RATE_PERCENT) -> float:
    a = safe_parse(amount)
    r = _rate(vat_rate_percent)
    if mode == "inclusive":
        return a - a / (1 + r)
    return a * r


@dataclass
class TaxEstimate:
    period: str
    multiplier: int
    sales_supply: float
    sales_vat: float
    purchase_supply: float
    purchase_vat: float
    vat_payable: float  # negative = refund
    profit_estimate: float
    assumed_tax: float

    @property
    def is_refund(self) -> bool:
        return self.vat_payable < 0

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


def estimate_tax(sales_amount: Any, purchase_amount: Any, *, sales_mode: str = "inclusive",
                 purchase_mode: str = "inclusive",
                 vat_rate_percent: Any = config.DEFAULT_VAT_RATE_PERCENT,
                 labor_cost: Any = 0, other_cost: Any = 0,
                 assumed_tax_rate_percent: Any = config.DEFAULT_ASSUMED_TAX_RATE_PERCENT,
                 period: str = "monthly") -> TaxEstimate:
    """Per-month figures scaled by the period multiplier (monthly 1, quarterly 3, yearly 12)."""
    multiplier = PERIOD_MULTIPLIER.get(period, 1)
    if period not in PERIOD_MULTIPLIER:
        period = "monthly"

    sales_supply = supply_price(sales_amount, sales_mode, vat_rate_percent)
    sales_vat = vat_amount(sales_amount, sales_mode, vat_rate_percent)
    purchase_supply = supply_price(purchase_amount, purchase_mode, vat_rate_percent)
    purchase_vat = vat_amount(purchase_amount, purchase_mode, vat_rate_percent)

    profit = sales_supply - purchase_supply - safe_parse(labor_cost) - safe_parse(other_cost)
    tax = profit * max(0.0, safe_parse(assumed_tax_rate_percent)) / 100

    return TaxEstimate(
        period=period,
        multiplier=multiplier,
        sales_supply=sales_supply * multiplier,
        sales_vat=sales_vat * multiplier,
        purchase_supply=purchase_supply * multiplier,
        purchase_vat=purchase_vat * multiplier,
        vat_payable=(sales_vat - purchase_vat) * multiplier,
        profit_estimate=profit * multiplier,
        assumed_tax=tax * multiplier,
    )
