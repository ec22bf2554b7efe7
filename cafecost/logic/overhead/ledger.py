"""Overhead ledger: every overhead record resolves to one monthly amount.

Missing dates or rates never produce a guessed figure: the affected part of
the formula simply contributes 0. Calls accept ``today`` so month counting can
be pinned; it defaults to the current date.
"""
from __future__ import annotations
from collections import defaultdict
from datetime import date as _date
from typing import Any, Dict, Iterable, List, Optional
import logging

from cafecost.domain.Overhead import (
    DepreciationItem,
    DepreciationOverhead,
    FlatOverhead,
    ItemizedOverhead,
    LeaseFacility,
    OverheadItem,
    OwnedFacility,
    UtilitiesOverhead,
)
from cafecost.logic.overhead.loans import loan_payment_for_month, monthly_rate, resolve_loan_amount
from cafecost.utilities.constants import OVERHEAD_CATEGORIES
from cafecost.utilities.dates import in_window, month_diff, month_diff_or_zero, parse_date
from cafecost.utilities.numbers import safe_div, safe_parse

logger = logging.getLogger(__name__)

__all__ = [
    "contract_months", "deposit_loan_interest", "lease_monthly", "owned_loan_payment",
    "owned_monthly", "utilities_monthly", "itemized_monthly", "depreciation_item_monthly",
    "depreciation_monthly", "monthly_amount", "total_monthly_overhead", "overhead_breakdown",
]


def _today(today: Optional[_date]) -> _date:
    return today if today is not None else _date.today()


def contract_months(start: Any, end: Any) -> int:
    """Length of a contract in months; 0 when either date is missing, invalid or reversed."""
    return month_diff_or_zero(start, end)


def deposit_loan_interest(amount: Any, annual_rate_percent: Any, start: Any, end: Any,
                          today: Optional[_date] = None) -> float:
    """Monthly interest on a loan taken for the deposit, only while today is inside [start, end]."""
    principal = safe_parse(amount)
    r = monthly_rate(annual_rate_percent)
    if principal <= 0 or r <= 0:
        return 0.0
    if not in_window(_today(today), start, end):
        return 0.0
    return principal * r


def lease_monthly(facility: LeaseFacility, today: Optional[_date] = None) -> float:
    months = contract_months(facility.contract_start, facility.contract_end)
    deposit_monthly = safe_div(safe_parse(facility.deposit), months)
    interest = deposit_loan_interest(
        facility.deposit_loan_amount,
        facility.deposit_loan_rate,
        facility.deposit_loan_start,
        facility.deposit_loan_end,
        today,
    )
    return safe_parse(facility.rent) + safe_parse(facility.management_fee) + deposit_monthly + interest


def owned_loan_payment(facility: OwnedFacility, today: Optional[_date] = None) -> float:
    """This month's repayment on the purchase loan (0 before the first month or after the last)."""
    amount = resolve_loan_amount(facility.purchase_price, facility.cash_paid, facility.loan_amount)
    term = month_diff_or_zero(facility.loan_start, facility.loan_end)
    start = parse_date(facility.loan_start)
    now = _today(today)
    if amount <= 0 or term <= 0 or start is None or now < start:
        return 0.0
    elapsed = month_diff(start, now)
    return loan_payment_for_month(
        amount,
        facility.loan_rate,
        term,
        elapsed,
        facility.loan_grace_months,
        facility.loan_method,
        custom_payment=facility.loan_custom_payment,
        increasing_start=facility.loan_increasing_start,
        increasing_rate_percent=facility.loan_increasing_rate,
    )


def owned_monthly(facility: OwnedFacility, today: Optional[_date] = None) -> float:
    property_tax = max(0.0, safe_parse(facility.property_tax_annual)) / 12
    comprehensive_tax = max(0.0, safe_parse(facility.comprehensive_tax_annual)) / 12
    return (safe_parse(facility.maintenance) + property_tax + comprehensive_tax
            + owned_loan_payment(facility, today))


def itemized_monthly(items: Iterable[OverheadItem]) -> float:
    return sum(max(0.0, safe_parse(item.amount)) for item in items)


def utilities_monthly(utilities: UtilitiesOverhead) -> float:
    base = (safe_parse(utilities.electric) + safe_parse(utilities.gas)
            + safe_parse(utilities.water) + safe_parse(utilities.internet))
    return base + itemized_monthly(utilities.subscription_items) + itemized_monthly(utilities.other_items)


def depreciation_item_monthly(item: DepreciationItem) -> float:
    """Straight-line: total_repayment / useful_months, 0 unless both are positive."""
    total = safe_parse(item.total_repayment)
    months = safe_parse(item.useful_months)
    if total <= 0 or months <= 0:
        return 0.0
    return total / months


def depreciation_monthly(depreciation: DepreciationOverhead) -> float:
    return sum(depreciation_item_monthly(item) for item in depreciation.items)


def monthly_amount(overhead: Any, today: Optional[_date] = None) -> float:
    """Resolved monthly figure for any overhead record."""
    if isinstance(overhead, LeaseFacility):
        return lease_monthly(overhead, today)
    if isinstance(overhead, OwnedFacility):
        return owned_monthly(overhead, today)
    if isinstance(overhead, UtilitiesOverhead):
        return utilities_monthly(overhead)
    if isinstance(overhead, ItemizedOverhead):
        return itemized_monthly(overhead.items)
    if isinstance(overhead, DepreciationOverhead):
        return depreciation_monthly(overhead)
    if isinstance(overhead, FlatOverhead):
        return max(0.0, safe_parse(overhead.stored_amount))
    logger.warning("Unsupported overhead record %r counted as 0", type(overhead).__name__)
    return 0.0


def total_monthly_overhead(overheads: Iterable[Any], today: Optional[_date] = None) -> float:
    return sum(monthly_amount(o, today) for o in overheads)


def overhead_breakdown(overheads: Iterable[Any], today: Optional[_date] = None) -> Dict[str, Any]:
    """Monthly totals per category.

    Returns structure:
    {
      'by_category': { 'facility': float, 'labor': float, ... },  # every known category present
      'records': [ { 'id', 'name', 'category', 'amount' }, ... ],
      'total': float
    }
    """
    by_category: Dict[str, float] = defaultdict(float)
    for category in OVERHEAD_CATEGORIES:
        by_category[category] = 0.0
    records: List[Dict[str, Any]] = []
    total = 0.0
    for overhead in overheads:
        amount = monthly_amount(overhead, today)
        category = getattr(overhead, 'category', 'etc')
        by_category[category] += amount
        total += amount
        records.append({
            'id': getattr(overhead, 'id', ''),
            'name': getattr(overhead, 'name', ''),
            'category': category,
            'amount': amount,
        })
    return {'by_category': dict(by_category), 'records': records, 'total': total}
