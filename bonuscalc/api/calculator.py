from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException

from bonuscalc.api.deps import get_state
from bonuscalc.core.money import to_amount
from bonuscalc.core.tier_rules import derive_tier_tables, rate_table_from_percent
from bonuscalc.schemas.calculator import CompareIn, ComparisonOut, PerformanceIn, PerfValue, ScenarioOut
from bonuscalc.schemas.settings import SettingsOut
from bonuscalc.services.bonus import compare_schemes, recommend
from bonuscalc.services.calculator import CalculatorState

router = APIRouter(prefix="/calculator", tags=["calculator"])


class CalculatorStateOut(ComparisonOut):
    settings: SettingsOut
    performance: list[PerfValue]


def state_out(state: CalculatorState) -> CalculatorStateOut:
    base = ComparisonOut.build(state.result, state.recommendation)
    return CalculatorStateOut(
        settings=SettingsOut.build(state.salary, state.tables),
        performance=state.performance,
        result=base.result,
        recommendation=base.recommendation,
    )


@router.get("", response_model=CalculatorStateOut, include_in_schema=False)
@router.get("/", response_model=CalculatorStateOut)
def read_calculator(state: CalculatorState = Depends(get_state)) -> CalculatorStateOut:
    return state_out(state)


@router.put("/performance", response_model=CalculatorStateOut)
def update_performance(payload: PerformanceIn, state: CalculatorState = Depends(get_state)) -> CalculatorStateOut:
    state.set_performance(payload.values)
    return state_out(state)


@router.post("/compare", response_model=ComparisonOut)
def compare(payload: CompareIn, state: CalculatorState = Depends(get_state)) -> ComparisonOut:
    tables = state.tables
    if payload.monthly_salary is not None or payload.rates_percent is not None:
        salary = state.salary
        if payload.monthly_salary is not None:
            salary = to_amount(payload.monthly_salary)
            if salary <= 0:
                raise HTTPException(status_code=422, detail="monthly salary must be > 0")
        rates = state.rates
        if payload.rates_percent is not None:
            rates = rate_table_from_percent(payload.rates_percent.monthly, payload.rates_percent.quarterly)
        tables = derive_tier_tables(salary, rates)

    result = compare_schemes(payload.values, tables)
    return ComparisonOut.build(result, recommend(result))


@router.get("/scenarios", response_model=list[ScenarioOut])
def list_scenarios(state: CalculatorState = Depends(get_state)) -> list[ScenarioOut]:
    out = []
    for sc, result, rec in state.scenario_results():
        base = ComparisonOut.build(result, rec)
        out.append(
            ScenarioOut(
                id=sc.id,
                label=sc.label,
                is_custom=sc.is_custom,
                performance=list(sc.performance),
                result=base.result,
                recommendation=base.recommendation,
            )
        )
    return out
