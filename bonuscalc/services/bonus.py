from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from typing import Literal, Sequence

from bonuscalc.core.money import format_currency, to_amount
from bonuscalc.core.tier_rules import TierConfig, TierTables

Outcome = Literal["quarterly", "monthly", "equal"]

ZERO = Decimal("0")


def _dec(x) -> Decimal:
    return x if isinstance(x, Decimal) else Decimal(str(x))


def calculate_progressive_bonus(performance, thresholds: Sequence, rates: Sequence) -> Decimal:
    """
    Прогрессивный бонус, как налоговые ступени: каждая ставка применяется
    только к части суммы внутри своего тира. Всё, что выше последнего
    порога, идёт по последней ставке из rates.

    Ввод не валидируется: мусор приводится к нулю до вызова (to_amount).
    """
    bonus = ZERO
    remaining = _dec(performance)
    lower_bound = ZERO

    for i, upper_bound in enumerate(thresholds):
        if remaining <= 0:
            break

        upper_bound = _dec(upper_bound)
        tier_range = upper_bound - lower_bound
        amount_in_tier = min(remaining, tier_range)

        bonus += amount_in_tier * _dec(rates[i])
        remaining -= amount_in_tier
        lower_bound = upper_bound

    if remaining > 0:
        bonus += remaining * _dec(rates[-1])

    return bonus


def bonus_for(performance, config: TierConfig) -> Decimal:
    return calculate_progressive_bonus(performance, config.thresholds, config.rates)


@dataclass(frozen=True)
class BonusResult:
    monthly_bonuses: tuple[Decimal, Decimal, Decimal]
    monthly_total: Decimal
    quarterly_performance: Decimal
    quarterly_total: Decimal


@dataclass(frozen=True)
class Recommendation:
    outcome: Outcome
    difference: Decimal

    @property
    def text(self) -> str:
        if self.outcome == "quarterly":
            return f"建議選擇【按季計算】，可多領 {format_currency(self.difference)}。"
        if self.outcome == "monthly":
            return f"建議選擇【按月計算】，可多領 {format_currency(self.difference)}。"
        return "兩種計算方式結果相同。"


def compare_schemes(performance_inputs: Sequence, tables: TierTables) -> BonusResult:
    """
    Месячная схема: бонус по каждому месяцу отдельно, потом сумма.
    Квартальная: сумма трёх месяцев через квартальную шкалу.
    """
    if len(performance_inputs) != 3:
        raise ValueError("expected exactly three monthly performance values")

    months = [to_amount(p) for p in performance_inputs]
    bonuses = tuple(bonus_for(p, tables.monthly) for p in months)
    quarterly_perf = sum(months, ZERO)

    return BonusResult(
        monthly_bonuses=bonuses,
        monthly_total=sum(bonuses, ZERO),
        quarterly_performance=quarterly_perf,
        quarterly_total=bonus_for(quarterly_perf, tables.quarterly),
    )


def recommend(result: BonusResult) -> Recommendation:
    diff = result.quarterly_total - result.monthly_total
    if diff > 0:
        return Recommendation(outcome="quarterly", difference=diff)
    if diff < 0:
        return Recommendation(outcome="monthly", difference=-diff)
    return Recommendation(outcome="equal", difference=ZERO)
