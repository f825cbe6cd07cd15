from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException, Request, status

from ..schemas.calc import CalcErrorDetail, CalcRequest, CalcResponse
from ..services.calculators.engine import CalculatorEngine

router = APIRouter(prefix="/calc", tags=["calc"])


def get_calculator(request: Request) -> CalculatorEngine:
    return request.app.state.calculator_engine


@router.post(
    "",
    response_model=CalcResponse,
    responses={status.HTTP_400_BAD_REQUEST: {"description": "Invalid expression"}},
)
async def calculate(
    payload: CalcRequest,
    calculator: CalculatorEngine = Depends(get_calculator),
) -> CalcResponse:
    outcome = calculator.run(payload.expression)
    if not outcome.success:
        detail = CalcErrorDetail(error=outcome.error, reason=outcome.reason)
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=detail.model_dump(mode="json"))
    return CalcResponse(expression=payload.expression, result=outcome.value)
