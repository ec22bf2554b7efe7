"""Loan amortization for owned facilities.

Supported methods (``method`` argument):
  annuity          equal total payment every month
  equal_principal  equal principal, interest on the remaining balance
  balloon          interest only, principal repaid at maturity
  increasing       payment grows by a fixed percent every month
  other            caller-supplied fixed monthly payment

During the grace period every method pays interest only. Months are counted
from 1 (the loan's first month); a month outside 1..term pays nothing.
"""
from __future__ import annotations
from typing import Any, Dict, List, Optional

from cafecost.utilities.numbers import safe_parse

__all__ = [
    "monthly_rate", "resolve_loan_amount", "loan_payment_for_month", "loan_schedule",
]


def monthly_rate(annual_rate_percent: Any) -> float:
    """Annual percent -> monthly fraction (6 -> 0.005). Non-positive rates give 0."""
    rate = safe_parse(annual_rate_percent)
    return rate / 12 / 100 if rate > 0 else 0.0


def resolve_loan_amount(purchase_price: Any, cash_paid: Any, explicit_amount: Optional[Any] = None) -> float:
    """An entered loan amount always wins (0 included); otherwise the unpaid part of the price."""
    if explicit_amount is not None:
        return safe_parse(explicit_amount)
    return max(0.0, safe_parse(purchase_price) - safe_parse(cash_paid))


def loan_payment_for_month(amount: Any, annual_rate_percent: Any, term_months: Any, elapsed_months: Any,
                           grace_months: Any = 0, method: Optional[str] = None, *,
                           custom_payment: Any = 0, increasing_start: Any = 0,
                           increasing_rate_percent: Any = 0) -> float:
    """Payment due in loan month ``elapsed_months`` (1-based)."""
    principal = safe_parse(amount)
    term = safe_parse(term_months)
    elapsed = safe_parse(elapsed_months)
    grace = max(0.0, safe_parse(grace_months))
    r = monthly_rate(annual_rate_percent)

    if principal <= 0 or term <= 0 or elapsed < 1 or elapsed > term:
        return 0.0

    if grace > 0 and elapsed <= grace:
        return principal * r

    amortization_term = max(1.0, term - grace)
    amortization_month = max(1.0, elapsed - grace)

    if method == "annuity":
        if r == 0:
            return principal / amortization_term
        factor = (1 + r) ** amortization_term
        return principal * r * factor / (factor - 1)
    if method == "equal_principal":
        per_month = principal / amortization_term
        remaining = max(0.0, principal - per_month * (amortization_month - 1))
        return per_month + remaining * r
    if method == "balloon":
        return principal * r
    if method == "increasing":
        start = safe_parse(increasing_start)
        if start <= 0:
            return 0.0
        growth = max(0.0, safe_parse(increasing_rate_percent) / 100)
        return start * (1 + growth) ** (amortization_month - 1)
    if method == "other":
        return max(0.0, safe_parse(custom_payment))
    return 0.0


def loan_schedule(amount: Any, annual_rate_percent: Any, term_months: Any, grace_months: Any = 0,
                  method: Optional[str] = None, *, custom_payment: Any = 0, increasing_start: Any = 0,
                  increasing_rate_percent: Any = 0) -> List[Dict[str, Any]]:
    """Month-by-month payments over the whole term.

    Returns: [ { 'month': int, 'phase': 'grace'|'amortization', 'payment': float }, ... ]
    """
    term = int(safe_parse(term_months))
    grace = max(0.0, safe_parse(grace_months))
    schedule: List[Dict[str, Any]] = []
    for month in range(1, term + 1):
        payment = loan_payment_for_month(
            amount, annual_rate_percent, term, month, grace, method,
            custom_payment=custom_payment,
            increasing_start=increasing_start,
            increasing_rate_percent=increasing_rate_percent,
        )
        schedule.append({
            'month': month,
            'phase': 'grace' if grace > 0 and month <= grace else 'amortization',
            'payment': payment,
        })
    return schedule
