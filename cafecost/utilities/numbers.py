"""Numeric coercion and money formatting shared by every calculator.

All formulas read their inputs through safe_parse, so a malformed figure
coming from a form or a CSV cell degrades to 0 instead of raising.
"""
import math
from typing import Any

__all__ = ["safe_parse", "safe_div", "format_krw"]


def safe_parse(value: Any) -> float:
    """Return value as a finite float, or 0.0 when it is missing, non-numeric or non-finite."""
    if value is None:
        return 0.0
    if isinstance(value, (int, float)):
        try:
            parsed = float(value)
        except (OverflowError, TypeError, ValueError):
            return 0.0
    else:
        text = str(value).strip()
        if not text:
            return 0.0
        try:
            parsed = float(text)
        except (TypeError, ValueError):
            return 0.0
    return parsed if math.isfinite(parsed) else 0.0


def safe_div(numerator: float, denominator: float) -> float:
    """Divide, short-circuiting to 0 when the denominator is not positive."""
    if denominator <= 0:
        return 0.0
    return numerator / denominator


def format_krw(n: Any) -> str:
    """Format an amount as whole won with thousands separators (e.g. 2,116,667)."""
    return f"{round(safe_parse(n)):,}"
