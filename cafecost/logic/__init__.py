"""Core cost engine.

Subpackages:
- costing: ingredient unit cost and recipe cost
- overhead: loans, depreciation, lease and the monthly overhead ledger, allocation by category
- pricing: per-menu economics and dashboard summaries
- scenario: what-if simulation at assumed volume/revenue/waste
- tax: VAT and income-tax estimate

Everything here is a pure function over snapshots: no I/O, no shared state.
"""
__all__ = ["costing", "overhead", "pricing", "scenario", "tax"]
