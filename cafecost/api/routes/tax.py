from fastapi import APIRouter

from cafecost.logic.tax.vat import estimate_tax
from cafecost.utilities.validators import TaxInput

router = APIRouter(prefix="/api/tax", tags=["tax"])


@router.post("/estimate")
def api_tax_estimate(req: TaxInput):
    """VAT payable (negative means a refund) and a rough income-tax figure for the period."""
    estimate = estimate_tax(
        req.sales_amount,
        req.purchase_amount,
        sales_mode=req.sales_mode,
        purchase_mode=req.purchase_mode,
        vat_rate_percent=req.vat_rate_percent,
        labor_cost=req.labor_cost,
        other_cost=req.other_cost,
        assumed_tax_rate_percent=req.assumed_tax_rate_percent,
        period=req.period,
    )
    data = estimate.to_dict()
    data['is_refund'] = estimate.is_refund
    return data
