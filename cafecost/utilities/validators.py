"""
Input validation schemas using Pydantic for the HTTP layer.

The calculators themselves accept anything and coerce bad numbers to 0; these
schemas are where negative amounts and out-of-range settings get rejected.
"""
from pydantic import BaseModel, Field, field_validator
from typing import Any, Dict, List, Literal, Optional
from datetime import date

from cafecost.utilities import config
from cafecost.utilities.constants import MAX_MENU_STEPS

_MENU_CATEGORY = r'^(drink|dessert|food|etc)$'


class IngredientInput(BaseModel):
    """Schema for ingredient input validation."""
    id: str = Field(..., min_length=1)
    name: str = Field(..., min_length=1, max_length=100)
    category: str = Field("etc", pattern=r'^(beverage|food|consumable|equipment|etc)$')
    unit_type: str = Field("g", pattern=r'^(g|ml|ea)$')
    pack_size: float = Field(..., gt=0)
    pack_price: float = Field(..., ge=0)
    created_at: Optional[int] = None

    @field_validator('name')
    @classmethod
    def strip_whitespace(cls, v):
        """Remove leading/trailing whitespace."""
        return v.strip()


class RecipeLineInput(BaseModel):
    ingredient_id: str = Field(..., min_length=1)
    amount: float = Field(..., ge=0)
    unit_type: str = Field("g", pattern=r'^(g|ml|ea)$')


class MenuInput(BaseModel):
    """Schema for menu input validation."""
    id: str = Field(..., min_length=1)
    name: str = Field(..., min_length=1, max_length=200)
    category: str = Field("drink", pattern=_MENU_CATEGORY)
    temp: str = Field("HOT", pattern=r'^(HOT|ICE)$')
    size_label: str = ""
    sell_price: float = Field(..., ge=0)
    steps: List[str] = Field(default_factory=list)
    recipe_items: List[RecipeLineInput] = Field(default_factory=list)
    created_at: Optional[int] = None

    @field_validator('steps')
    @classmethod
    def validate_steps(cls, v):
        """Filter out empty steps and reject more than the allowed number."""
        steps = [step.strip() for step in v if step and step.strip()]
        if len(steps) > MAX_MENU_STEPS:
            raise ValueError(f'A menu can have at most {MAX_MENU_STEPS} steps')
        return steps


def _find_negative(value: Any, path: str = "") -> Optional[str]:
    if isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        return path if value < 0 else None
    if isinstance(value, dict):
        for k, v in value.items():
            found = _find_negative(v, f"{path}.{k}" if path else str(k))
            if found:
                return found
    if isinstance(value, list):
        for i, v in enumerate(value):
            found = _find_negative(v, f"{path}[{i}]")
            if found:
                return found
    return None


class SettingsInput(BaseModel):
    """Schema for cost settings validation."""
    target_margin_percent: float = Field(config.DEFAULT_TARGET_MARGIN_PERCENT, ge=0, le=90)
    rounding_unit: Literal[10, 100] = config.DEFAULT_ROUNDING_UNIT
    monthly_sales_volume: float = Field(config.DEFAULT_MONTHLY_SALES_VOLUME, ge=0)
    include_overhead_in_cost: bool = config.DEFAULT_INCLUDE_OVERHEAD
    category_sales_mix: Dict[str, float] = Field(default_factory=lambda: dict(config.DEFAULT_CATEGORY_MIX))
    category_overhead_mix: Dict[str, float] = Field(default_factory=lambda: dict(config.DEFAULT_CATEGORY_MIX))

    @field_validator('category_sales_mix', 'category_overhead_mix')
    @classmethod
    def validate_mix(cls, v):
        """Mix weights cannot be negative."""
        bad = _find_negative(v)
        if bad:
            raise ValueError(f'Mix weight for {bad} cannot be negative')
        return v


class OverheadResolveRequest(BaseModel):
    """Overhead records in their stored (camelCase) form."""
    overheads: List[Dict[str, Any]] = Field(default_factory=list)
    today: Optional[date] = None

    @field_validator('overheads')
    @classmethod
    def validate_overheads(cls, v):
        """Overhead detail amounts must be zero or more."""
        bad = _find_negative(v)
        if bad:
            raise ValueError(f'Overhead field {bad} cannot be negative')
        return v


class CostingRequest(OverheadResolveRequest):
    """Snapshot of everything the cost engine reads."""
    ingredients: List[IngredientInput] = Field(default_factory=list)
    menus: List[MenuInput] = Field(default_factory=list)
    settings: SettingsInput = Field(default_factory=SettingsInput)


class ScenarioInput(BaseModel):
    """Schema for what-if scenario validation."""
    id: str = ""
    name: str = Field(..., min_length=1)
    monthly_sales_volume: float = Field(..., gt=0)
    monthly_revenue: float = Field(..., gt=0)
    waste_percent: float = Field(0, ge=0, le=100)
    sales_mix: Dict[str, float] = Field(default_factory=dict)
    overhead_mix: Dict[str, float] = Field(default_factory=dict)
    sales_mix_mode: Literal["percent", "count"] = "percent"
    overhead_mix_mode: Literal["percent", "count"] = "percent"

    @field_validator('name')
    @classmethod
    def validate_name(cls, v):
        """Validate scenario name."""
        if not v.strip():
            raise ValueError('Scenario name cannot be empty')
        return v.strip()


class SimulationRequest(CostingRequest):
    scenario: ScenarioInput


class LoanScheduleInput(BaseModel):
    """Schema for a loan schedule preview."""
    amount: float = Field(..., ge=0)
    annual_rate_percent: float = Field(0, ge=0)
    term_months: int = Field(..., ge=0, le=600)
    grace_months: float = Field(0, ge=0)
    method: Optional[Literal["annuity", "equal_principal", "balloon", "increasing", "other"]] = None
    custom_payment: float = Field(0, ge=0)
    increasing_start: float = Field(0, ge=0)
    increasing_rate_percent: float = Field(0, ge=0)


class TaxInput(BaseModel):
    """Schema for the VAT / income-tax estimate."""
    period: Literal["monthly", "quarterly", "yearly"] = "monthly"
    vat_rate_percent: float = Field(config.DEFAULT_VAT_RATE_PERCENT, ge=0)
    sales_amount: float = Field(0, ge=0)
    sales_mode: Literal["inclusive", "exclusive"] = "inclusive"
    purchase_amount: float = Field(0, ge=0)
    purchase_mode: Literal["inclusive", "exclusive"] = "inclusive"
    labor_cost: float = Field(0, ge=0)
    other_cost: float = Field(0, ge=0)
    assumed_tax_rate_percent: float = Field(config.DEFAULT_ASSUMED_TAX_RATE_PERCENT, ge=0)


class CsvPayload(BaseModel):
    text: str = Field(..., min_length=1)
