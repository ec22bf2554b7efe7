from fastapi import APIRouter, HTTPException, Response
import csv
import logging

from cafecost.domain.Overhead import overhead_from_dict, overhead_to_dict
from cafecost.logic.overhead.ledger import overhead_breakdown
from cafecost.logic.overhead.loans import loan_schedule
from cafecost.utilities.export_import import overheads_from_csv, overheads_to_csv
from cafecost.utilities.validators import CsvPayload, LoanScheduleInput, OverheadResolveRequest

router = APIRouter(prefix="/api/overheads", tags=["overheads"])
logger = logging.getLogger(__name__)


@router.post("/resolve")
def api_resolve_overheads(req: OverheadResolveRequest):
    """Monthly amount of every overhead record, with per-category totals."""
    overheads = [overhead_from_dict(o) for o in req.overheads]
    return overhead_breakdown(overheads, req.today)


@router.post("/loan-schedule")
def api_loan_schedule(req: LoanScheduleInput):
    schedule = loan_schedule(
        req.amount,
        req.annual_rate_percent,
        req.term_months,
        req.grace_months,
        req.method,
        custom_payment=req.custom_payment,
        increasing_start=req.increasing_start,
        increasing_rate_percent=req.increasing_rate_percent,
    )
    return {
        'schedule': schedule,
        'total_paid': sum(row['payment'] for row in schedule),
    }


@router.post("/import-csv")
def api_import_csv(payload: CsvPayload):
    try:
        overheads = overheads_from_csv(payload.text)
    except csv.Error as e:
        logger.error("Overhead CSV could not be parsed: %s", e)
        raise HTTPException(status_code=400, detail=f"Invalid CSV: {e}")
    if not overheads:
        raise HTTPException(status_code=400, detail="No overhead rows found (header row plus at least one data row expected)")
    return {'overheads': [overhead_to_dict(o) for o in overheads], 'count': len(overheads)}


@router.post("/export-csv")
def api_export_csv(req: OverheadResolveRequest):
    overheads = [overhead_from_dict(o) for o in req.overheads]
    return Response(
        content=overheads_to_csv(overheads),
        media_type="text/csv",
        headers={"Content-Disposition": 'attachment; filename="overheads.csv"'},
    )
