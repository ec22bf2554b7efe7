from typing import Final

DATE_FORMAT: Final[str] = "%Y-%m-%d"
MAX_MENU_STEPS: Final[int] = 6
DEFAULT_USEFUL_MONTHS: Final[int] = 36

MENU_CATEGORIES: Final[tuple] = ("drink", "dessert", "food", "etc")
INGREDIENT_CATEGORIES: Final[tuple] = ("beverage", "food", "consumable", "equipment", "etc")
UNIT_TYPES: Final[tuple] = ("g", "ml", "ea")
OVERHEAD_CATEGORIES: Final[tuple] = (
    "facility", "labor", "utilities", "fees", "depreciation", "marketing", "etc"
)
LOAN_METHODS: Final[tuple] = ("annuity", "equal_principal", "balloon", "increasing", "other")
PAYMENT_METHODS: Final[tuple] = ("cash", "installment", "lease")
ROUNDING_UNITS: Final[tuple] = (10, 100)

MENU_CATEGORY_LABELS: Final[dict[str, str]] = {
    "drink": "음료",
    "dessert": "디저트",
    "food": "음식",
    "etc": "기타",
}
INGREDIENT_CATEGORY_LABELS: Final[dict[str, str]] = {
    "beverage": "음료용",
    "food": "식재료용",
    "consumable": "소모품",
    "equipment": "그릇/기자재",
    "etc": "기타",
}
OVERHEAD_CATEGORY_LABELS: Final[dict[str, str]] = {
    "facility": "공간비",
    "labor": "인건비",
    "utilities": "공과금",
    "fees": "수수료",
    "depreciation": "시설비(감가상각)",
    "marketing": "광고비",
    "etc": "기타",
}
# CSV imports accept either the key or the short Korean label
OVERHEAD_CATEGORY_ALIASES: Final[dict[str, str]] = {
    **{c: c for c in OVERHEAD_CATEGORIES},
    "공간비": "facility",
    "인건비": "labor",
    "공과금": "utilities",
    "수수료": "fees",
    "시설비": "depreciation",
    "광고비": "marketing",
    "기타": "etc",
}

PERIOD_MULTIPLIER: Final[dict[str, int]] = {"monthly": 1, "quarterly": 3, "yearly": 12}
