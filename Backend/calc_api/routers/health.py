from __future__ import annotations

from fastapi import APIRouter, Depends, Request

from ..config import Settings
from ..services.calculators.engine import CalculatorEngine
from .calc import get_calculator

router = APIRouter(tags=["health"])


def get_app_settings(request: Request) -> Settings:
    return request.app.state.settings


@router.get("/health")
async def health(
    settings: Settings = Depends(get_app_settings),
    calculator: CalculatorEngine = Depends(get_calculator),
) -> dict[str, str]:
    # smoke-evaluate a fixed expression so a broken engine shows up here
    engine_status = "ok" if calculator.run("(1+2)*3").value == 9 else "degraded"
    return {"status": engine_status, "environment": settings.environment, "service": settings.project_name}
