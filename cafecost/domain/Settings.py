"""Settings domain entity: pricing target, rounding and the category mix weights."""
from typing import Dict, Optional
from cafecost.utilities import config
from cafecost.utilities.constants import MENU_CATEGORIES
from cafecost.utilities.numbers import safe_parse


def _flag(value) -> bool:
    if isinstance(value, str):
        return value.strip().lower() == 'true'
    return bool(value)


def _mix(values: Optional[Dict[str, float]]) -> Dict[str, float]:
    # Weights, not shares: they are not required to add up to 100
    return {str(k): safe_parse(v) for k, v in (values or {}).items()}


class Settings:
    def __init__(self, target_margin_percent: float = config.DEFAULT_TARGET_MARGIN_PERCENT,
                 rounding_unit: int = config.DEFAULT_ROUNDING_UNIT,
                 monthly_sales_volume: float = config.DEFAULT_MONTHLY_SALES_VOLUME,
                 include_overhead_in_cost: bool = config.DEFAULT_INCLUDE_OVERHEAD,
                 category_sales_mix: Optional[Dict[str, float]] = None,
                 category_overhead_mix: Optional[Dict[str, float]] = None):
        self.target_margin_percent = safe_parse(target_margin_percent)
        self.rounding_unit = 10 if safe_parse(rounding_unit) == 10 else 100
        self.monthly_sales_volume = safe_parse(monthly_sales_volume)
        self.include_overhead_in_cost = _flag(include_overhead_in_cost)
        self.category_sales_mix = _mix(
            category_sales_mix if category_sales_mix is not None else config.DEFAULT_CATEGORY_MIX
        )
        self.category_overhead_mix = _mix(
            category_overhead_mix if category_overhead_mix is not None else config.DEFAULT_CATEGORY_MIX
        )

    def __str__(self) -> str:
        basis = "ingredients+overhead" if self.include_overhead_in_cost else "ingredients only"
        return (f"Settings(margin={self.target_margin_percent:g}%, unit={self.rounding_unit}, "
                f"volume={self.monthly_sales_volume:g}, cost={basis})")

    __repr__ = __str__

    def sales_mix_for(self, category: str) -> float:
        return self.category_sales_mix.get(category, 0.0)

    def overhead_mix_for(self, category: str) -> float:
        return self.category_overhead_mix.get(category, 0.0)

    @staticmethod
    def from_dict(data):
        '''Merges a stored (possibly partial) settings mapping over the defaults.'''
        d = dict(data) if isinstance(data, dict) else {}

        def pick(snake, camel, default):
            if snake in d and d[snake] is not None:
                return d[snake]
            if camel in d and d[camel] is not None:
                return d[camel]
            return default

        return Settings(
            target_margin_percent=pick("target_margin_percent", "targetMarginPercent",
                                       config.DEFAULT_TARGET_MARGIN_PERCENT),
            rounding_unit=pick("rounding_unit", "roundingUnit", config.DEFAULT_ROUNDING_UNIT),
            monthly_sales_volume=pick("monthly_sales_volume", "monthlySalesVolume",
                                      config.DEFAULT_MONTHLY_SALES_VOLUME),
            include_overhead_in_cost=pick("include_overhead_in_cost", "includeOverheadInCost",
                                          config.DEFAULT_INCLUDE_OVERHEAD),
            category_sales_mix=pick("category_sales_mix", "categorySalesMixPercent", None),
            category_overhead_mix=pick("category_overhead_mix", "categoryOverheadMixPercent", None),
        )

    def to_dict(self):
        return {
            "targetMarginPercent": self.target_margin_percent,
            "roundingUnit": self.rounding_unit,
            "monthlySalesVolume": self.monthly_sales_volume,
            "includeOverheadInCost": self.include_overhead_in_cost,
            "categorySalesMixPercent": {c: self.sales_mix_for(c) for c in MENU_CATEGORIES},
            "categoryOverheadMixPercent": {c: self.overhead_mix_for(c) for c in MENU_CATEGORIES},
        }


__all__ = ["Settings"]
