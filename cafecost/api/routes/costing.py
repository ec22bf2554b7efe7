from fastapi import APIRouter
from typing import List
import logging

from cafecost.domain.Ingredient import Ingredient
from cafecost.domain.Menu import Menu
from cafecost.domain.Overhead import overhead_from_dict
from cafecost.domain.Settings import Settings
from cafecost.logic.costing.recipe_cost import index_ingredients, recipe_cost_breakdown, unit_cost
from cafecost.logic.pricing.dashboard import build_dashboard
from cafecost.logic.pricing.economics import menu_economics
from cafecost.utilities.numbers import format_krw
from cafecost.utilities.validators import CostingRequest, IngredientInput, MenuInput, SettingsInput

router = APIRouter(prefix="/api", tags=["costing"])
logger = logging.getLogger(__name__)


def to_ingredient(payload: IngredientInput) -> Ingredient:
    return Ingredient(**payload.model_dump())


def to_menu(payload: MenuInput) -> Menu:
    return Menu.from_dict(payload.model_dump())


def to_settings(payload: SettingsInput) -> Settings:
    return Settings(**payload.model_dump())


def load_snapshot(req: CostingRequest):
    """Domain objects for everything in a request: (ingredients, menus, overheads, settings)."""
    ingredients = [to_ingredient(i) for i in req.ingredients]
    menus = [to_menu(m) for m in req.menus]
    overheads = [overhead_from_dict(o) for o in req.overheads]
    return ingredients, menus, overheads, to_settings(req.settings)


@router.post("/ingredients/unit-cost")
def api_unit_cost(ingredients: List[IngredientInput]):
    """Unit cost (price per g/ml/ea) of each ingredient."""
    items = []
    for payload in ingredients:
        ing = to_ingredient(payload)
        items.append({
            'id': ing.id,
            'name': ing.name,
            'unit_type': ing.unit_type,
            'unit_cost': unit_cost(ing),
        })
    return {'items': items, 'count': len(items)}


@router.post("/menus/cost")
def api_menu_cost(req: CostingRequest):
    """Per-line recipe cost for each menu; lines pointing at unknown ingredients are flagged."""
    ingredients, menus, _, _ = load_snapshot(req)
    index = index_ingredients(ingredients)
    result = []
    for menu in menus:
        breakdown = recipe_cost_breakdown(menu, index)
        breakdown['menu_id'] = menu.id
        breakdown['name'] = menu.name
        result.append(breakdown)
    return {'menus': result}


@router.post("/menus/economics")
def api_menu_economics(req: CostingRequest):
    ingredients, menus, overheads, settings = load_snapshot(req)
    index = index_ingredients(ingredients)
    items = [menu_economics(m, index, overheads, settings, req.today).to_dict() for m in menus]
    return {'menus': items}


@router.post("/dashboard")
def api_dashboard(req: CostingRequest):
    ingredients, menus, overheads, settings = load_snapshot(req)
    data = build_dashboard(menus, ingredients, overheads, settings, req.today)
    data['overhead_total_display'] = format_krw(data['overhead_total'])
    logger.info("Dashboard computed for %d menu(s)", len(menus))
    return data
