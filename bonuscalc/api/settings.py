# bonuscalc/api/settings.py
from __future__ import annotations

from decimal import Decimal

from fastapi import APIRouter, Depends, HTTPException

from bonuscalc.api.deps import get_state
from bonuscalc.core.tier_rules import SCHEMES, TIER_COUNT
from bonuscalc.schemas.settings import RateIn, SalaryIn, SettingsOut
from bonuscalc.services.calculator import CalculatorState

router = APIRouter(prefix="/settings", tags=["settings"])


@router.get("", response_model=SettingsOut, include_in_schema=False)
@router.get("/", response_model=SettingsOut)
def read_settings(state: CalculatorState = Depends(get_state)) -> SettingsOut:
    return SettingsOut.build(state.salary, state.tables)


@router.put("/salary", response_model=SettingsOut)
def update_salary(payload: SalaryIn, state: CalculatorState = Depends(get_state)) -> SettingsOut:
    # Пороги пересчитываются от оклада, ставки не меняются
    try:
        state.set_salary(payload.monthly_salary)
    except ValueError as e:
        raise HTTPException(status_code=422, detail=str(e))
    return SettingsOut.build(state.salary, state.tables)


@router.put("/rates/{scheme}/{index}", response_model=SettingsOut)
def update_rate(
    scheme: str,
    index: int,
    payload: RateIn,
    state: CalculatorState = Depends(get_state),
) -> SettingsOut:
    if scheme not in SCHEMES:
        raise HTTPException(status_code=404, detail=f"Unknown scheme: {scheme}")
    if not 0 <= index < TIER_COUNT:
        raise HTTPException(status_code=404, detail=f"Tier index out of range: {index}")

    state.set_rate(scheme, index, Decimal(str(payload.rate_percent)) / 100)
    return SettingsOut.build(state.salary, state.tables)


@router.post("/reset", response_model=SettingsOut)
def reset_settings(state: CalculatorState = Depends(get_state)) -> SettingsOut:
    state.reset()
    return SettingsOut.build(state.salary, state.tables)
