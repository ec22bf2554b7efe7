"""
CSV export and import for ingredients, menus and overheads.

Itemized lists travel inside one cell as pipe-separated ``name:amount`` pairs,
e.g. ``POS:33000|Kiosk:55000``. Depreciation items use
``name:totalRepayment:usefulMonths:purchaseDate:paymentMethod``.
"""
import csv
import io
from typing import Any, Dict, List
import logging

from cafecost.domain.Ingredient import Ingredient
from cafecost.domain.Menu import Menu, RecipeLine
from cafecost.domain.Overhead import Overhead, overhead_from_dict, overhead_to_dict
from cafecost.utilities.constants import DEFAULT_USEFUL_MONTHS, OVERHEAD_CATEGORY_ALIASES
from cafecost.utilities.numbers import safe_parse

logger = logging.getLogger(__name__)

OVERHEAD_CSV_HEADERS: List[str] = [
    "category", "amount", "facilityType",
    "facilityRent", "facilityManagementFee", "facilityDeposit",
    "facilityContractStart", "facilityContractEnd",
    "facilityDepositLoanAmount", "facilityDepositLoanRate",
    "facilityDepositLoanStart", "facilityDepositLoanEnd",
    "facilityMaintenance", "facilityPurchasePrice", "facilityCashPaid",
    "facilityLoanAmount", "facilityLoanRate", "facilityLoanStart", "facilityLoanEnd",
    "facilityLoanGraceMonths", "facilityLoanMethod", "facilityLoanCustomPayment",
    "facilityLoanIncreasingStart", "facilityLoanIncreasingRate",
    "facilityPropertyTaxAnnual", "facilityComprehensiveTaxAnnual",
    "utilitiesElectric", "utilitiesGas", "utilitiesWater", "utilitiesInternet",
    "utilitiesSubscriptions", "utilitiesOther",
    "laborItems", "feeItems", "marketingItems", "etcItems", "depreciationItems",
]
INGREDIENT_CSV_HEADERS: List[str] = ["id", "name", "category", "unitType", "packSize", "packPrice"]
MENU_CSV_HEADERS: List[str] = ["id", "name", "category", "temp", "sizeLabel", "sellPrice", "recipe", "steps"]

# Stored keys whose value is a plain number or date on the overhead record
_FACILITY_FIELDS = [h for h in OVERHEAD_CSV_HEADERS if h.startswith("facility") and h != "facilityType"]
_UTILITY_FIELDS = ["utilitiesElectric", "utilitiesGas", "utilitiesWater", "utilitiesInternet"]
_ITEM_COLUMNS = {
    "labor": ("laborItems", "name", "monthlyCost"),
    "fees": ("feeItems", "name", "monthlyCost"),
    "marketing": ("marketingItems", "platform", "actualSpend"),
    "etc": ("etcItems", "name", "monthlyCost"),
}


def to_csv(rows: List[List[Any]]) -> str:
    """Every cell quoted, rows joined by newlines."""
    buf = io.StringIO()
    writer = csv.writer(buf, quoting=csv.QUOTE_ALL, lineterminator="\n")
    for row in rows:
        writer.writerow(["" if cell is None else str(cell) for cell in row])
    return buf.getvalue().rstrip("\n")


def parse_csv(text: str) -> List[List[str]]:
    """Quote-aware CSV parsing; cells are trimmed and blank rows dropped."""
    text = (text or "").lstrip("\ufeff")
    rows: List[List[str]] = []
    for row in csv.reader(io.StringIO(text)):
        cells = [cell.strip() for cell in row]
        if any(cells):
            rows.append(cells)
    return rows


def parse_pairs(raw: str) -> List[Dict[str, Any]]:
    """'a:1|b:2' -> [{'name': 'a', 'amount': 1.0}, ...]; unnamed or negative entries are dropped."""
    items: List[Dict[str, Any]] = []
    for chunk in (raw or "").split("|"):
        chunk = chunk.strip()
        if not chunk:
            continue
        name, _, amount = chunk.partition(":")
        name = name.strip()
        value = safe_parse(amount or 0)
        if name and value >= 0:
            items.append({"name": name, "amount": value})
    return items


def format_pairs(items: List[Dict[str, Any]], name_key: str = "name", amount_key: str = "amount") -> str:
    return "|".join(f"{item.get(name_key, '')}:{_num(item.get(amount_key, 0))}" for item in items)


def _num(value: Any) -> str:
    if value is None or value == "":
        return ""
    n = safe_parse(value)
    return str(int(n)) if n == int(n) else str(n)


def _parse_depreciation(raw: str) -> List[Dict[str, Any]]:
    entries: List[Dict[str, Any]] = []
    for chunk in (raw or "").split("|"):
        chunk = chunk.strip()
        if not chunk:
            continue
        parts = (chunk.split(":") + ["", "", "", ""])[:5]
        name, total, months, purchase_date, method = (p.strip() for p in parts)
        total_value = safe_parse(total or 0)
        if not name or total_value < 0:
            continue
        entries.append({
            "name": name,
            "totalRepayment": total_value,
            "usefulMonths": safe_parse(months) if months else DEFAULT_USEFUL_MONTHS,
            "purchaseDate": purchase_date or None,
            "paymentMethod": method or "cash",
        })
    return entries


def overheads_from_csv(text: str) -> List[Overhead]:
    """Reads an overhead CSV (header row first). Unknown categories import as 'etc'.

    The amount column is ignored: every imported record resolves its monthly
    figure from the detail columns. Export writes it for reference only.
    """
    rows = parse_csv(text)
    if len(rows) <= 1:
        logger.info("Overhead CSV has no data rows")
        return []
    headers = [cell.strip().lower() for cell in rows[0]]
    overheads: List[Overhead] = []

    for index, row in enumerate(rows[1:]):
        def get(name: str) -> str:
            key = name.lower()
            if key in headers:
                pos = headers.index(key)
                return row[pos] if pos < len(row) else ""
            return ""

        raw_category = (get("category") or (row[0] if row else "")).strip()
        category = OVERHEAD_CATEGORY_ALIASES.get(raw_category, "etc")
        record: Dict[str, Any] = {
            "id": f"oh-import-{index}",
            "category": category,
        }
        if category == "facility":
            record["facilityType"] = get("facilityType") or "lease"
            for field_name in _FACILITY_FIELDS:
                value = get(field_name)
                if value != "":
                    record[field_name] = value
        elif category == "utilities":
            for field_name in _UTILITY_FIELDS:
                record[field_name] = safe_parse(get(field_name))
            record["utilitiesSubscriptionsItems"] = parse_pairs(get("utilitiesSubscriptions"))
            record["utilitiesOtherItems"] = parse_pairs(get("utilitiesOther"))
        elif category == "depreciation":
            record["depreciationItems"] = _parse_depreciation(get("depreciationItems"))
        elif category in _ITEM_COLUMNS:
            column, name_key, amount_key = _ITEM_COLUMNS[category]
            record[column] = [{name_key: p["name"], amount_key: p["amount"]} for p in parse_pairs(get(column))]
        overheads.append(overhead_from_dict(record))

    logger.info("Imported %d overhead record(s) from CSV", len(overheads))
    return overheads


def overheads_to_csv(overheads: List[Overhead]) -> str:
    rows: List[List[Any]] = [OVERHEAD_CSV_HEADERS]
    for overhead in overheads:
        stored = overhead_to_dict(overhead)
        record: Dict[str, Any] = {h: "" for h in OVERHEAD_CSV_HEADERS}
        record["category"] = stored["category"]
        record["amount"] = _num(stored["amount"])
        record["facilityType"] = stored.get("facilityType", "")
        for field_name in _FACILITY_FIELDS + _UTILITY_FIELDS:
            value = stored.get(field_name)
            if value is None:
                continue
            record[field_name] = value if isinstance(value, str) else _num(value)
        record["utilitiesSubscriptions"] = format_pairs(stored.get("utilitiesSubscriptionsItems", []))
        record["utilitiesOther"] = format_pairs(stored.get("utilitiesOtherItems", []))
        for column, name_key, amount_key in _ITEM_COLUMNS.values():
            record[column] = format_pairs(stored.get(column, []), name_key, amount_key)
        record["depreciationItems"] = "|".join(
            ":".join([
                d["name"], _num(d["totalRepayment"]), _num(d["usefulMonths"]),
                d.get("purchaseDate") or "", d.get("paymentMethod") or "cash",
            ])
            for d in stored.get("depreciationItems", [])
        )
        rows.append([record[h] for h in OVERHEAD_CSV_HEADERS])
    return to_csv(rows)


def ingredients_from_csv(text: str) -> List[Ingredient]:
    rows = parse_csv(text)
    if len(rows) <= 1:
        return []
    headers = [cell.strip().lower() for cell in rows[0]]
    result: List[Ingredient] = []
    for index, row in enumerate(rows[1:]):
        d = {headers[i]: row[i] for i in range(min(len(headers), len(row)))}
        if not d.get("name"):
            continue
        result.append(Ingredient.from_dict({
            "id": d.get("id") or f"ing-import-{index}",
            "name": d.get("name"),
            "category": d.get("category") or "etc",
            "unitType": d.get("unittype") or "g",
            "packSize": safe_parse(d.get("packsize")),
            "packPrice": safe_parse(d.get("packprice")),
        }))
    return result


def ingredients_to_csv(ingredients: List[Ingredient]) -> str:
    rows: List[List[Any]] = [INGREDIENT_CSV_HEADERS]
    for ing in ingredients:
        rows.append([ing.id, ing.name, ing.category, ing.unit_type, _num(ing.pack_size), _num(ing.pack_price)])
    return to_csv(rows)


def menus_from_csv(text: str) -> List[Menu]:
    """Menu rows carry the recipe as 'ingredientId:amount|...' and steps separated by '|'."""
    rows = parse_csv(text)
    if len(rows) <= 1:
        return []
    headers = [cell.strip().lower() for cell in rows[0]]
    result: List[Menu] = []
    for index, row in enumerate(rows[1:]):
        d = {headers[i]: row[i] for i in range(min(len(headers), len(row)))}
        if not d.get("name"):
            continue
        lines = [RecipeLine(ingredient_id=p["name"], amount=p["amount"]) for p in parse_pairs(d.get("recipe", ""))]
        result.append(Menu(
            id=d.get("id") or f"menu-import-{index}",
            name=d["name"],
            category=d.get("category") or "drink",
            temp=(d.get("temp") or "HOT").upper(),
            size_label=d.get("sizelabel", ""),
            sell_price=safe_parse(d.get("sellprice")),
            steps=[s.strip() for s in (d.get("steps") or "").split("|")],
            recipe_items=lines,
        ))
    return result


def menus_to_csv(menus: List[Menu]) -> str:
    rows: List[List[Any]] = [MENU_CSV_HEADERS]
    for menu in menus:
        recipe = format_pairs([{"name": line.ingredient_id, "amount": line.amount} for line in menu.recipe_items])
        rows.append([menu.id, menu.name, menu.category, menu.temp, menu.size_label,
                     _num(menu.sell_price), recipe, "|".join(menu.steps)])
    return to_csv(rows)
