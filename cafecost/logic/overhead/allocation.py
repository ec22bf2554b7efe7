"""Spread the monthly overhead over units sold.

A category with a positive sales-mix weight and a positive overhead-mix weight
carries (overhead share) / (its share of volume). Any other category falls back
to the uniform figure: total overhead / total volume.
"""
from __future__ import annotations
from datetime import date as _date
from typing import Any, Iterable, Optional

from cafecost.domain.Settings import Settings
from cafecost.logic.overhead.ledger import total_monthly_overhead
from cafecost.utilities.numbers import safe_div, safe_parse

__all__ = ["uniform_overhead_per_unit", "overhead_per_unit_by_category", "allocate"]


def uniform_overhead_per_unit(overheads: Iterable[Any], monthly_sales_volume: Any,
                              today: Optional[_date] = None) -> float:
    volume = safe_parse(monthly_sales_volume)
    if volume <= 0:
        return 0.0
    return total_monthly_overhead(overheads, today) / volume


def overhead_per_unit_by_category(overheads: Iterable[Any], monthly_sales_volume: Any,
                                  sales_mix_percent: Any, overhead_mix_percent: Any,
                                  today: Optional[_date] = None) -> float:
    overheads = list(overheads)
    sales_pct = safe_parse(sales_mix_percent)
    overhead_pct = safe_parse(overhead_mix_percent)
    if sales_pct <= 0 or overhead_pct <= 0:
        return uniform_overhead_per_unit(overheads, monthly_sales_volume, today)
    category_overhead = total_monthly_overhead(overheads, today) * overhead_pct / 100
    category_volume = safe_parse(monthly_sales_volume) * sales_pct / 100
    return safe_div(category_overhead, category_volume)


def allocate(overheads: Iterable[Any], settings: Settings, category: str,
             today: Optional[_date] = None) -> float:
    """Overhead per unit for a menu of ``category`` under the given settings."""
    return overhead_per_unit_by_category(
        overheads,
        settings.monthly_sales_volume,
        settings.sales_mix_for(category),
        settings.overhead_mix_for(category),
        today,
    )
