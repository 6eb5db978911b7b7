import logging
import time
from fastapi import APIRouter, HTTPException

from soroban.core.config import get_settings
from soroban.core.deps import get_rng
from soroban.drills import MAGNITUDE_REGISTRY, contract_for_columns
from soroban.models.drill import (
    DrillSetOut,
    GenerateRequest,
    GenerateResponse,
    MagnitudeInfo,
    SessionRequest,
    SessionResponse,
)
from soroban.services.session import plan_session
from soroban.services.telemetry import emit_event, instrument

logger = logging.getLogger("soroban.api")
router = APIRouter(prefix="/api/v1/drills", tags=["drills-v1"])


@router.get("/magnitudes", response_model=list[MagnitudeInfo])
def list_magnitudes():
    return [
        MagnitudeInfo(
            magnitude=tag,
            column_count=contract.column_count,
            label=contract.label,
        )
        for tag, contract in MAGNITUDE_REGISTRY.items()
    ]


@router.post("/generate", response_model=GenerateResponse)
@instrument(route="/api/v1/drills/generate", version="v1")
def generate(req: GenerateRequest):
    settings = get_settings()
    if req.set_count > settings.max_sets_per_request:
        raise HTTPException(
            status_code=400,
            detail=f"set_count may not exceed {settings.max_sets_per_request}",
        )

    contract = contract_for_columns(req.column_count)
    t0 = time.time()
    try:
        report = contract.generate(req.set_count, req.rows, get_rng(req.seed), req.mode)
    except ValueError as e:
        logger.error(f"[drills.generate] {e}")
        raise HTTPException(status_code=400, detail=str(e))
    elapsed_ms = int((time.time() - t0) * 1000)

    emit_event(
        "drills_generated",
        route="/api/v1/drills/generate",
        version="v1",
        magnitude=contract.magnitude_tag,
        rows=req.rows,
        requested=req.set_count,
        produced=len(report.sets),
        ok=True,
    )

    return GenerateResponse(
        sets=[DrillSetOut(**s.to_dict()) for s in report.sets],
        requested=report.requested,
        dropped=report.dropped,
        generation_time_ms=elapsed_ms,
    )


@router.post("/session", response_model=SessionResponse)
@instrument(route="/api/v1/drills/session", version="v1")
def session(req: SessionRequest):
    plan = plan_session(req.total_rounds, req.rows, req.magnitude, get_rng(req.seed), req.mode)

    emit_event(
        "session_planned",
        route="/api/v1/drills/session",
        version="v1",
        magnitude=plan.magnitude,
        rows=plan.rows,
        requested=plan.total_rounds,
        produced=len(plan.sets),
        ok=plan.shortfall == 0,
    )

    return SessionResponse(
        magnitude=plan.magnitude,
        rows=plan.rows,
        sets=[DrillSetOut(**s.to_dict()) for s in plan.sets],
        shortfall=plan.shortfall,
    )
