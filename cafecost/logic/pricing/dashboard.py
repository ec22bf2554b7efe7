"""Dashboard aggregation over all menus."""
from __future__ import annotations
from datetime import date as _date
from typing import Any, Dict, Iterable, List, Optional

from cafecost.domain.Menu import Menu
from cafecost.domain.Settings import Settings
from cafecost.logic.costing.recipe_cost import IngredientSource, index_ingredients
from cafecost.logic.overhead.allocation import uniform_overhead_per_unit
from cafecost.logic.overhead.ledger import total_monthly_overhead
from cafecost.logic.pricing.economics import MenuEconomics, menu_economics
from cafecost.utilities.constants import MENU_CATEGORIES

__all__ = [
    "summarize_menus", "summarize_categories", "average_margin", "lowest_margin", "build_dashboard",
]


def summarize_menus(menus: Iterable[Menu], ingredients: IngredientSource, overheads: Iterable[Any],
                    settings: Settings, today: Optional[_date] = None) -> List[MenuEconomics]:
    index = index_ingredients(ingredients)
    overheads = list(overheads)
    return [menu_economics(menu, index, overheads, settings, today) for menu in menus]


def summarize_categories(summaries: Iterable[MenuEconomics]) -> Dict[str, Dict[str, float]]:
    """Totals per menu category; every category is present, empty ones with zeros."""
    totals: Dict[str, Dict[str, float]] = {
        c: {'count': 0, 'total_sell': 0.0, 'total_cost': 0.0, 'total_net': 0.0} for c in MENU_CATEGORIES
    }
    for s in summaries:
        bucket = totals.setdefault(s.menu.category,
                                   {'count': 0, 'total_sell': 0.0, 'total_cost': 0.0, 'total_net': 0.0})
        bucket['count'] += 1
        bucket['total_sell'] += s.menu.sell_price
        bucket['total_cost'] += s.cost
        bucket['total_net'] += s.net_profit
    return totals


def average_margin(summaries: List[MenuEconomics]) -> float:
    if not summaries:
        return 0.0
    return sum(s.margin for s in summaries) / len(summaries)


def lowest_margin(summaries: List[MenuEconomics]) -> Optional[MenuEconomics]:
    if not summaries:
        return None
    return min(summaries, key=lambda s: s.margin)


def build_dashboard(menus: Iterable[Menu], ingredients: IngredientSource, overheads: Iterable[Any],
                    settings: Settings, today: Optional[_date] = None) -> Dict[str, Any]:
    """Everything the cost dashboard shows, in one structure.

    {
      'overhead_total': float,
      'overhead_per_unit': float,          # uniform figure at the configured volume
      'menus': [ MenuEconomics.to_dict(), ... ],
      'categories': { 'drink': {count, total_sell, total_cost, total_net}, ... },
      'average_margin': float,
      'lowest_margin': { 'name': str, 'margin': float } | None,
      'missing_menus': int                 # menus with at least one dangling ingredient
    }
    """
    overheads = list(overheads)
    summaries = summarize_menus(menus, ingredients, overheads, settings, today)
    lowest = lowest_margin(summaries)
    return {
        'overhead_total': total_monthly_overhead(overheads, today),
        'overhead_per_unit': uniform_overhead_per_unit(overheads, settings.monthly_sales_volume, today),
        'menus': [s.to_dict() for s in summaries],
        'categories': summarize_categories(summaries),
        'average_margin': average_margin(summaries),
        'lowest_margin': {'name': lowest.menu.name, 'margin': lowest.margin} if lowest else None,
        'missing_menus': sum(1 for s in summaries if s.has_missing_ingredients),
    }
