# bonuscalc/schemas/calculator.py
from __future__ import annotations

from typing import Annotated, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field

from bonuscalc.core.money import format_currency
from bonuscalc.services.bonus import BonusResult, Recommendation

PerfValue = Union[float, str, None]
RatePercent = Annotated[float, Field(ge=0, le=100, allow_inf_nan=False)]


class PerformanceIn(BaseModel):
    """
    Три месяца. Пустое/мусор -> 0 при расчёте (не ошибка).
    """
    model_config = ConfigDict(extra="forbid")

    values: list[PerfValue] = Field(..., min_length=3, max_length=3)


class RatesPercentIn(BaseModel):
    model_config = ConfigDict(extra="forbid")

    monthly: list[RatePercent] = Field(..., min_length=4, max_length=4)
    quarterly: list[RatePercent] = Field(..., min_length=4, max_length=4)


class CompareIn(BaseModel):
    """Разовый расчёт без сохранения. Без salary/rates — текущие настройки."""
    model_config = ConfigDict(extra="forbid")

    values: list[PerfValue] = Field(..., min_length=3, max_length=3)
    monthly_salary: Optional[float] = Field(default=None, gt=0, allow_inf_nan=False)
    rates_percent: Optional[RatesPercentIn] = None


class BonusResultOut(BaseModel):
    monthly_bonuses: list[float]
    monthly_total: float
    quarterly_performance: float
    quarterly_total: float

    formatted: dict[str, str] = {}

    @classmethod
    def from_result(cls, result: BonusResult) -> "BonusResultOut":
        b1, b2, b3 = result.monthly_bonuses
        return cls(
            monthly_bonuses=[float(b) for b in result.monthly_bonuses],
            monthly_total=float(result.monthly_total),
            quarterly_performance=float(result.quarterly_performance),
            quarterly_total=float(result.quarterly_total),
            formatted={
                "bonus1": format_currency(b1),
                "bonus2": format_currency(b2),
                "bonus3": format_currency(b3),
                "monthly_total": format_currency(result.monthly_total),
                "quarterly_performance": format_currency(result.quarterly_performance),
                "quarterly_total": format_currency(result.quarterly_total),
            },
        )


class RecommendationOut(BaseModel):
    outcome: Literal["quarterly", "monthly", "equal"]
    difference: float
    text: str

    @classmethod
    def from_recommendation(cls, rec: Recommendation) -> "RecommendationOut":
        return cls(outcome=rec.outcome, difference=float(rec.difference), text=rec.text)


class ComparisonOut(BaseModel):
    result: Optional[BonusResultOut] = None
    recommendation: Optional[RecommendationOut] = None

    @classmethod
    def build(cls, result: BonusResult | None, rec: Recommendation | None) -> "ComparisonOut":
        return cls(
            result=BonusResultOut.from_result(result) if result else None,
            recommendation=RecommendationOut.from_recommendation(rec) if rec else None,
        )


class ScenarioOut(ComparisonOut):
    id: str
    label: str
    is_custom: bool = False
    performance: list[PerfValue]
