from fastapi import APIRouter
import logging

from cafecost.api.routes.costing import load_snapshot
from cafecost.domain.Scenario import SimulationScenario
from cafecost.logic.scenario.simulation import mix_ready, normalize_mix, run_scenario
from cafecost.utilities.validators import SimulationRequest

router = APIRouter(prefix="/api/simulations", tags=["simulations"])
logger = logging.getLogger(__name__)


@router.post("/preview")
def api_simulation_preview(req: SimulationRequest):
    """Run one what-if scenario against the submitted menus, ingredients and overheads."""
    ingredients, menus, overheads, settings = load_snapshot(req)
    s = req.scenario
    scenario = SimulationScenario(
        id=s.id,
        name=s.name,
        monthly_sales_volume=s.monthly_sales_volume,
        monthly_revenue=s.monthly_revenue,
        waste_percent=s.waste_percent,
        sales_mix=normalize_mix(s.sales_mix, s.sales_mix_mode),
        overhead_mix=normalize_mix(s.overhead_mix, s.overhead_mix_mode),
    )
    result = run_scenario(scenario, menus, ingredients, overheads, settings, req.today)
    result['sales_mix_ready'] = mix_ready(s.sales_mix, s.sales_mix_mode)
    result['overhead_mix_ready'] = mix_ready(s.overhead_mix, s.overhead_mix_mode)
    logger.info("Scenario '%s' previewed", scenario.name)
    return result
