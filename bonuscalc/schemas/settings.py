# bonuscalc/schemas/settings.py
from __future__ import annotations

import math
from typing import Literal, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from bonuscalc.core.money import format_wan
from bonuscalc.core.tier_rules import SCHEMES, TierConfig, TierTables


class SalaryIn(BaseModel):
    model_config = ConfigDict(extra="forbid")

    monthly_salary: float = Field(..., gt=0, allow_inf_nan=False)


class RateIn(BaseModel):
    """Ставка в процентах (как в UI): 5 -> 0.05"""
    model_config = ConfigDict(extra="forbid")

    rate_percent: float = Field(..., ge=0, le=100)

    @field_validator("rate_percent")
    @classmethod
    def finite(cls, v: float) -> float:
        if not math.isfinite(v):
            raise ValueError("rate_percent must be a finite number")
        return v


class TierRowOut(BaseModel):
    index: int
    label: str
    lower: float
    upper: Optional[float] = None
    rate_percent: float


class TierTableOut(BaseModel):
    scheme: Literal["monthly", "quarterly"]
    title: str
    thresholds: list[float]
    rows: list[TierRowOut]

    @classmethod
    def from_config(cls, scheme: str, config: TierConfig) -> "TierTableOut":
        bounds = [0, *config.thresholds]
        rows = []
        for i, rate in enumerate(config.rates):
            lower = bounds[i]
            upper = config.thresholds[i] if i < len(config.thresholds) else None
            if upper is None:
                label = f"{format_wan(lower)} 以上"
            elif lower == 0:
                label = f"0 ~ {format_wan(upper)}"
            else:
                label = f"{format_wan(lower)} ~ {format_wan(upper)}"
            rows.append(
                TierRowOut(
                    index=i,
                    label=label,
                    lower=float(lower),
                    upper=float(upper) if upper is not None else None,
                    rate_percent=float(rate * 100),
                )
            )
        title = "月結獎金級距" if scheme == "monthly" else "季結獎金級距"
        return cls(
            scheme=scheme,
            title=title,
            thresholds=[float(t) for t in config.thresholds],
            rows=rows,
        )


class SettingsOut(BaseModel):
    monthly_salary: float
    tables: list[TierTableOut]

    @classmethod
    def build(cls, salary, tables: TierTables) -> "SettingsOut":
        return cls(
            monthly_salary=float(salary),
            tables=[TierTableOut.from_config(s, tables.for_scheme(s)) for s in SCHEMES],
        )
