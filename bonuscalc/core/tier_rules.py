from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from typing import Literal, Sequence

Scheme = Literal["monthly", "quarterly"]
SCHEMES: tuple[Scheme, ...] = ("monthly", "quarterly")

# Пороги месячной шкалы = оклад * множитель
MONTHLY_MULTIPLIERS: tuple[int, ...] = (3, 5, 10)
# Квартальный порог = 3 * месячный
QUARTERLY_FACTOR = 3

# 3 ограниченных тира + верхний (без потолка)
TIER_COUNT = len(MONTHLY_MULTIPLIERS) + 1


def _dec(x) -> Decimal:
    return x if isinstance(x, Decimal) else Decimal(str(x))


@dataclass(frozen=True)
class TierConfig:
    """
    Прогрессивная шкала: thresholds по возрастанию, rates на один длиннее.
    Последний rate применяется ко всему, что выше самого высокого порога.
    """
    thresholds: tuple[Decimal, ...]
    rates: tuple[Decimal, ...]

    def __post_init__(self):
        thresholds = tuple(_dec(t) for t in self.thresholds)
        rates = tuple(_dec(r) for r in self.rates)
        object.__setattr__(self, "thresholds", thresholds)
        object.__setattr__(self, "rates", rates)

        if len(rates) != len(thresholds) + 1:
            raise ValueError(
                f"rates must have exactly one more entry than thresholds "
                f"(got {len(rates)} rates for {len(thresholds)} thresholds)"
            )
        if any(r < 0 for r in rates):
            raise ValueError("rates must be >= 0")
        if any(t <= 0 for t in thresholds):
            raise ValueError("thresholds must be > 0")
        if any(b <= a for a, b in zip(thresholds, thresholds[1:])):
            raise ValueError("thresholds must be strictly increasing")

    @classmethod
    def from_reduced(cls, thresholds: Sequence, rates: Sequence) -> "TierConfig":
        """Шкала вида 3 порога / 3 ставки: верхний тир берёт последнюю ставку."""
        rates = list(rates)
        if len(rates) != len(thresholds) or not rates:
            raise ValueError("reduced tier table needs one rate per threshold")
        return cls(tuple(thresholds), tuple(rates + [rates[-1]]))

    @property
    def top_rate(self) -> Decimal:
        return self.rates[-1]


@dataclass(frozen=True)
class TierTables:
    monthly: TierConfig
    quarterly: TierConfig

    def for_scheme(self, scheme: Scheme) -> TierConfig:
        if scheme == "quarterly":
            return self.quarterly
        return self.monthly


# {"monthly": [r0, r1, r2, r3], "quarterly": [...]}, доли (0.05 = 5%)
RateTable = dict[Scheme, list[Decimal]]


def rates_from_percent(rates_percent: Sequence[float]) -> list[Decimal]:
    """[3, 5, 10, 10] -> [0.03, 0.05, 0.1, 0.1]"""
    rates = [_dec(r) / 100 for r in rates_percent]
    if len(rates) != TIER_COUNT:
        raise ValueError(f"expected {TIER_COUNT} rates, got {len(rates)}")
    return rates


def rate_table_from_percent(monthly: Sequence[float], quarterly: Sequence[float]) -> RateTable:
    return {"monthly": rates_from_percent(monthly), "quarterly": rates_from_percent(quarterly)}


def default_rate_table(rates_percent: Sequence[float]) -> RateTable:
    return rate_table_from_percent(rates_percent, rates_percent)


def monthly_thresholds(salary) -> tuple[Decimal, ...]:
    s = _dec(salary)
    return tuple(s * m for m in MONTHLY_MULTIPLIERS)


def quarterly_thresholds(salary) -> tuple[Decimal, ...]:
    return tuple(t * QUARTERLY_FACTOR for t in monthly_thresholds(salary))


def derive_tier_tables(salary, rate_table: RateTable) -> TierTables:
    """Пересчёт всех порогов от оклада. Ставки берутся как есть."""
    return TierTables(
        monthly=TierConfig(monthly_thresholds(salary), tuple(rate_table["monthly"])),
        quarterly=TierConfig(quarterly_thresholds(salary), tuple(rate_table["quarterly"])),
    )


def with_rate(rate_table: RateTable, scheme: Scheme, index: int, rate) -> RateTable:
    """Меняет одну ставку одной шкалы, остальное не трогает."""
    if scheme not in SCHEMES:
        raise ValueError(f"unknown scheme: {scheme}")
    if not 0 <= index < TIER_COUNT:
        raise ValueError(f"tier index out of range: {index}")
    rate = _dec(rate)
    if rate < 0:
        raise ValueError("rate must be >= 0")

    updated = {s: list(rates) for s, rates in rate_table.items()}
    updated[scheme][index] = rate
    return updated
