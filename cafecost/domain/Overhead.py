"""Overhead domain entities.

Each overhead category has its own record type; Overhead is the union of them.
Records hold the detail fields only. The monthly figure is never stored: the
``amount`` property recomputes it through the overhead ledger every time it is
read.

Quick import:
    from cafecost.domain.Overhead import Overhead, overhead_from_dict
"""
from __future__ import annotations
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Union

from cafecost.utilities.constants import (
    DEFAULT_USEFUL_MONTHS,
    LOAN_METHODS,
    OVERHEAD_CATEGORY_LABELS,
    PAYMENT_METHODS,
)
from cafecost.utilities.numbers import safe_parse

__all__ = [
    "OverheadItem", "DepreciationItem", "LeaseFacility", "OwnedFacility", "UtilitiesOverhead",
    "ItemizedOverhead", "DepreciationOverhead", "FlatOverhead", "Overhead", "overhead_from_dict",
    "overhead_to_dict",
]


def _get(d: Dict[str, Any], snake: str, camel: str, default: Any = None) -> Any:
    if snake in d:
        return d[snake]
    return d.get(camel, default)


def _opt_str(value: Any) -> Optional[str]:
    if value is None:
        return None
    text = str(value).strip()
    return text or None


@dataclass
class OverheadItem:
    name: str = ""
    amount: float = 0.0

    @staticmethod
    def from_dict(data: Any, name_key: str = "name", amount_key: str = "amount") -> "OverheadItem":
        d = data if isinstance(data, dict) else {}
        name = d.get(name_key, d.get("name", ""))
        amount = d.get(amount_key, d.get("amount", 0))
        return OverheadItem(name=str(name or ""), amount=safe_parse(amount))


@dataclass
class DepreciationItem:
    name: str = ""
    total_repayment: float = 0.0
    useful_months: float = float(DEFAULT_USEFUL_MONTHS)
    purchase_date: Optional[str] = None
    payment_method: str = "cash"  # cash|installment|lease

    @staticmethod
    def from_dict(data: Any) -> "DepreciationItem":
        d = data if isinstance(data, dict) else {}
        method = _get(d, "payment_method", "paymentMethod", "cash")
        return DepreciationItem(
            name=str(d.get("name") or ""),
            total_repayment=safe_parse(_get(d, "total_repayment", "totalRepayment", 0)),
            useful_months=safe_parse(_get(d, "useful_months", "usefulMonths", 0)),
            purchase_date=_opt_str(_get(d, "purchase_date", "purchaseDate")),
            payment_method=method if method in PAYMENT_METHODS else "cash",
        )


class _OverheadBase:
    category: str = "etc"

    @property
    def amount(self) -> float:
        from cafecost.logic.overhead.ledger import monthly_amount
        return monthly_amount(self)

    @property
    def label(self) -> str:
        return OVERHEAD_CATEGORY_LABELS.get(self.category, self.category)


@dataclass
class LeaseFacility(_OverheadBase):
    id: str = ""
    name: str = ""
    rent: float = 0.0
    management_fee: float = 0.0
    deposit: float = 0.0
    contract_start: Optional[str] = None
    contract_end: Optional[str] = None
    deposit_loan_amount: float = 0.0
    deposit_loan_rate: float = 0.0  # annual percent
    deposit_loan_start: Optional[str] = None
    deposit_loan_end: Optional[str] = None
    category: str = field(default="facility", init=False)
    facility_type: str = field(default="lease", init=False)


@dataclass
class OwnedFacility(_OverheadBase):
    id: str = ""
    name: str = ""
    maintenance: float = 0.0
    purchase_price: float = 0.0
    cash_paid: float = 0.0
    # None means "not entered": the loan then covers purchase_price - cash_paid
    loan_amount: Optional[float] = None
    loan_rate: float = 0.0  # annual percent
    loan_start: Optional[str] = None
    loan_end: Optional[str] = None
    loan_grace_months: float = 0.0
    loan_method: Optional[str] = None
    loan_custom_payment: float = 0.0
    loan_increasing_start: float = 0.0
    loan_increasing_rate: float = 0.0  # percent per month
    property_tax_annual: float = 0.0
    comprehensive_tax_annual: float = 0.0
    category: str = field(default="facility", init=False)
    facility_type: str = field(default="own", init=False)


@dataclass
class UtilitiesOverhead(_OverheadBase):
    id: str = ""
    name: str = ""
    electric: float = 0.0
    gas: float = 0.0
    water: float = 0.0
    internet: float = 0.0
    subscription_items: List[OverheadItem] = field(default_factory=list)
    other_items: List[OverheadItem] = field(default_factory=list)
    category: str = field(default="utilities", init=False)


@dataclass
class ItemizedOverhead(_OverheadBase):
    """labor, fees, marketing and etc share one shape: a list of monthly items."""
    category: str = "etc"
    id: str = ""
    name: str = ""
    items: List[OverheadItem] = field(default_factory=list)


@dataclass
class DepreciationOverhead(_OverheadBase):
    id: str = ""
    name: str = ""
    items: List[DepreciationItem] = field(default_factory=list)
    category: str = field(default="depreciation", init=False)


@dataclass
class FlatOverhead(_OverheadBase):
    """A record with nothing but a stored monthly amount (unknown category)."""
    category: str = "etc"
    id: str = ""
    name: str = ""
    stored_amount: float = 0.0


Overhead = Union[
    LeaseFacility, OwnedFacility, UtilitiesOverhead, ItemizedOverhead, DepreciationOverhead, FlatOverhead
]

# Field names of the itemized lists per category, as stored: (list key, name key, amount key)
_ITEMIZED_KEYS = {
    "labor": (("labor_items", "laborItems"), "name", "monthlyCost"),
    "fees": (("fee_items", "feeItems"), "name", "monthlyCost"),
    "marketing": (("marketing_items", "marketingItems"), "platform", "actualSpend"),
    "etc": (("etc_items", "etcItems"), "name", "monthlyCost"),
}


def _items(d: Dict[str, Any], keys, name_key: str, amount_key: str) -> List[OverheadItem]:
    raw = _get(d, keys[0], keys[1], [])
    if not isinstance(raw, (list, tuple)):
        return []
    return [OverheadItem.from_dict(entry, name_key, amount_key) for entry in raw if isinstance(entry, dict)]


def _lease_from_dict(d: Dict[str, Any], ident: str, name: str) -> LeaseFacility:
    return LeaseFacility(
        id=ident,
        name=name,
        rent=safe_parse(_get(d, "rent", "facilityRent", 0)),
        management_fee=safe_parse(_get(d, "management_fee", "facilityManagementFee", 0)),
        deposit=safe_parse(_get(d, "deposit", "facilityDeposit", 0)),
        contract_start=_opt_str(_get(d, "contract_start", "facilityContractStart")),
        contract_end=_opt_str(_get(d, "contract_end", "facilityContractEnd")),
        deposit_loan_amount=safe_parse(_get(d, "deposit_loan_amount", "facilityDepositLoanAmount", 0)),
        deposit_loan_rate=safe_parse(_get(d, "deposit_loan_rate", "facilityDepositLoanRate", 0)),
        deposit_loan_start=_opt_str(_get(d, "deposit_loan_start", "facilityDepositLoanStart")),
        deposit_loan_end=_opt_str(_get(d, "deposit_loan_end", "facilityDepositLoanEnd")),
    )


def _owned_from_dict(d: Dict[str, Any], ident: str, name: str) -> OwnedFacility:
    raw_loan = _get(d, "loan_amount", "facilityLoanAmount")
    has_loan = raw_loan is not None and str(raw_loan).strip() != ""
    method = _get(d, "loan_method", "facilityLoanMethod")
    return OwnedFacility(
        id=ident,
        name=name,
        maintenance=safe_parse(_get(d, "maintenance", "facilityMaintenance", 0)),
        purchase_price=safe_parse(_get(d, "purchase_price", "facilityPurchasePrice", 0)),
        cash_paid=safe_parse(_get(d, "cash_paid", "facilityCashPaid", 0)),
        loan_amount=safe_parse(raw_loan) if has_loan else None,
        loan_rate=safe_parse(_get(d, "loan_rate", "facilityLoanRate", 0)),
        loan_start=_opt_str(_get(d, "loan_start", "facilityLoanStart")),
        loan_end=_opt_str(_get(d, "loan_end", "facilityLoanEnd")),
        loan_grace_months=safe_parse(_get(d, "loan_grace_months", "facilityLoanGraceMonths", 0)),
        loan_method=method if method in LOAN_METHODS else None,
        loan_custom_payment=safe_parse(_get(d, "loan_custom_payment", "facilityLoanCustomPayment", 0)),
        loan_increasing_start=safe_parse(_get(d, "loan_increasing_start", "facilityLoanIncreasingStart", 0)),
        loan_increasing_rate=safe_parse(_get(d, "loan_increasing_rate", "facilityLoanIncreasingRate", 0)),
        property_tax_annual=safe_parse(_get(d, "property_tax_annual", "facilityPropertyTaxAnnual", 0)),
        comprehensive_tax_annual=safe_parse(
            _get(d, "comprehensive_tax_annual", "facilityComprehensiveTaxAnnual", 0)
        ),
    )


def _depreciation_from_dict(d: Dict[str, Any], ident: str, name: str) -> DepreciationOverhead:
    raw = _get(d, "depreciation_items", "depreciationItems")
    if raw is None:
        # Older records kept a single purchase on the overhead itself
        price = _get(d, "purchase_price", "purchasePrice")
        months = _get(d, "useful_months", "usefulMonths")
        raw = []
        if safe_parse(price) or safe_parse(months):
            raw = [{
                "name": name or "기타 시설비",
                "totalRepayment": price,
                "usefulMonths": months if months is not None else DEFAULT_USEFUL_MONTHS,
            }]
    if not isinstance(raw, (list, tuple)):
        raw = []
    items = [DepreciationItem.from_dict(entry) for entry in raw if isinstance(entry, dict)]
    return DepreciationOverhead(id=ident, name=name, items=items)


def overhead_from_dict(data: Any) -> Overhead:
    '''Builds the record type matching the stored category. Never raises on odd input.'''
    d = dict(data) if isinstance(data, dict) else {}
    category = str(d.get("category") or "").strip()
    ident = str(d.get("id") or "")
    name = str(d.get("name") or OVERHEAD_CATEGORY_LABELS.get(category, ""))

    if category == "facility":
        facility_type = _get(d, "facility_type", "facilityType", "lease")
        if facility_type == "own":
            return _owned_from_dict(d, ident, name)
        return _lease_from_dict(d, ident, name)
    if category == "utilities":
        return UtilitiesOverhead(
            id=ident,
            name=name,
            electric=safe_parse(_get(d, "electric", "utilitiesElectric", 0)),
            gas=safe_parse(_get(d, "gas", "utilitiesGas", 0)),
            water=safe_parse(_get(d, "water", "utilitiesWater", 0)),
            internet=safe_parse(_get(d, "internet", "utilitiesInternet", 0)),
            subscription_items=_items(d, ("subscription_items", "utilitiesSubscriptionsItems"), "name", "amount"),
            other_items=_items(d, ("other_items", "utilitiesOtherItems"), "name", "amount"),
        )
    if category == "depreciation":
        return _depreciation_from_dict(d, ident, name)
    if category in _ITEMIZED_KEYS:
        keys, name_key, amount_key = _ITEMIZED_KEYS[category]
        if "items" in d:
            keys = ("items", "items")
        return ItemizedOverhead(category=category, id=ident, name=name,
                                items=_items(d, keys, name_key, amount_key))
    return FlatOverhead(category=category or "etc", id=ident, name=name,
                        stored_amount=safe_parse(d.get("amount", 0)))


def overhead_to_dict(overhead: Overhead) -> Dict[str, Any]:
    '''Stored (camelCase) form of a record, with the freshly resolved monthly amount.'''
    out: Dict[str, Any] = {
        "id": overhead.id,
        "name": overhead.name,
        "category": overhead.category,
        "amount": overhead.amount,
    }
    if isinstance(overhead, LeaseFacility):
        out.update({
            "facilityType": "lease",
            "facilityRent": overhead.rent,
            "facilityManagementFee": overhead.management_fee,
            "facilityDeposit": overhead.deposit,
            "facilityContractStart": overhead.contract_start,
            "facilityContractEnd": overhead.contract_end,
            "facilityDepositLoanAmount": overhead.deposit_loan_amount,
            "facilityDepositLoanRate": overhead.deposit_loan_rate,
            "facilityDepositLoanStart": overhead.deposit_loan_start,
            "facilityDepositLoanEnd": overhead.deposit_loan_end,
        })
    elif isinstance(overhead, OwnedFacility):
        out.update({
            "facilityType": "own",
            "facilityMaintenance": overhead.maintenance,
            "facilityPurchasePrice": overhead.purchase_price,
            "facilityCashPaid": overhead.cash_paid,
            "facilityLoanAmount": overhead.loan_amount,
            "facilityLoanRate": overhead.loan_rate,
            "facilityLoanStart": overhead.loan_start,
            "facilityLoanEnd": overhead.loan_end,
            "facilityLoanGraceMonths": overhead.loan_grace_months,
            "facilityLoanMethod": overhead.loan_method,
            "facilityLoanCustomPayment": overhead.loan_custom_payment,
            "facilityLoanIncreasingStart": overhead.loan_increasing_start,
            "facilityLoanIncreasingRate": overhead.loan_increasing_rate,
            "facilityPropertyTaxAnnual": overhead.property_tax_annual,
            "facilityComprehensiveTaxAnnual": overhead.comprehensive_tax_annual,
        })
    elif isinstance(overhead, UtilitiesOverhead):
        out.update({
            "utilitiesElectric": overhead.electric,
            "utilitiesGas": overhead.gas,
            "utilitiesWater": overhead.water,
            "utilitiesInternet": overhead.internet,
            "utilitiesSubscriptionsItems": [{"name": i.name, "amount": i.amount} for i in overhead.subscription_items],
            "utilitiesOtherItems": [{"name": i.name, "amount": i.amount} for i in overhead.other_items],
        })
    elif isinstance(overhead, ItemizedOverhead):
        keys, name_key, amount_key = _ITEMIZED_KEYS.get(overhead.category, _ITEMIZED_KEYS["etc"])
        out[keys[1]] = [{name_key: i.name, amount_key: i.amount} for i in overhead.items]
    elif isinstance(overhead, DepreciationOverhead):
        out["depreciationItems"] = [
            {
                "name": i.name,
                "totalRepayment": i.total_repayment,
                "usefulMonths": i.useful_months,
                "purchaseDate": i.purchase_date,
                "paymentMethod": i.payment_method,
            }
            for i in overhead.items
        ]
    return out
