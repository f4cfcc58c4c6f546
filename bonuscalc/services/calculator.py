from __future__ import annotations

import logging
from dataclasses import dataclass
from decimal import Decimal
from typing import Optional

from bonuscalc.core.money import is_blank, to_amount
from bonuscalc.core.tier_rules import RateTable, Scheme, TierTables, derive_tier_tables, with_rate
from bonuscalc.services import preferences
from bonuscalc.services.bonus import BonusResult, Recommendation, compare_schemes, recommend
from bonuscalc.services.preferences import KeyValueStore

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Scenario:
    id: str
    label: str
    performance: tuple
    is_custom: bool = False


# Готовые сценарии (вкладки) + свой ввод
SCENARIOS: tuple[Scenario, ...] = (
    Scenario("example1", "情境一: 月均 15萬", (150000, 150000, 150000)),
    Scenario("example2", "情境二: 月均 21萬", (210000, 210000, 210000)),
    Scenario("example3", "情境三: 月均 41萬", (410000, 410000, 410000)),
)
CUSTOM_SCENARIO_ID = "custom"
CUSTOM_SCENARIO_LABEL = "自訂計算機"


class CalculatorState:
    """
    Состояние калькулятора: оклад, ставки, последний ввод.
    Каждая мутация сначала пересчитывает результат, потом сохраняется в store.
    """

    def __init__(self, store: KeyValueStore, salary: Decimal, rates: RateTable, performance: list):
        self.store = store
        self.salary = salary
        self.rates = rates
        self.performance = list(performance)
        self.tables: TierTables
        self.result: Optional[BonusResult]
        self.recommendation: Optional[Recommendation]
        self._recompute()

    @classmethod
    def load(cls, store: KeyValueStore) -> "CalculatorState":
        return cls(
            store,
            salary=preferences.load_salary(store),
            rates=preferences.load_rates(store),
            performance=preferences.load_performance(store),
        )

    @staticmethod
    def _derive(salary, rates: RateTable, performance: list):
        tables = derive_tier_tables(salary, rates)
        # Пустой свой ввод -> результата нет
        if all(is_blank(v) for v in performance):
            return tables, None, None
        result = compare_schemes(performance, tables)
        return tables, result, recommend(result)

    def _recompute(self) -> None:
        self.tables, self.result, self.recommendation = self._derive(self.salary, self.rates, self.performance)

    def _apply(self, salary, rates: RateTable, performance: list) -> None:
        """Сначала считаем, потом присваиваем: если расчёт упал, state не меняется."""
        self.tables, self.result, self.recommendation = self._derive(salary, rates, performance)
        self.salary, self.rates, self.performance = salary, rates, performance

    # ── mutations ─────────────────────────────────────────────
    def set_salary(self, salary) -> None:
        salary = to_amount(salary)
        if salary <= 0:
            raise ValueError("monthly salary must be > 0")
        self._apply(salary, self.rates, self.performance)
        preferences.save_salary(self.store, salary)
        logger.info("calculator: salary set to %s", salary)

    def set_rate(self, scheme: Scheme, index: int, rate) -> None:
        self._apply(self.salary, with_rate(self.rates, scheme, index, rate), self.performance)
        preferences.save_rates(self.store, self.rates)
        logger.info("calculator: %s rate #%s set to %s", scheme, index, rate)

    def set_performance(self, values) -> None:
        values = list(values)
        if len(values) != 3:
            raise ValueError("expected exactly three monthly performance values")
        self._apply(self.salary, self.rates, values)
        preferences.save_performance(self.store, values)

    def reset(self) -> None:
        preferences.reset(self.store)
        self.salary = preferences.default_salary()
        self.rates = preferences.default_rates()
        self.performance = preferences.default_performance()
        self._recompute()

    # ── scenarios ─────────────────────────────────────────────
    def evaluate(self, performance) -> tuple[BonusResult, Recommendation]:
        result = compare_schemes(performance, self.tables)
        return result, recommend(result)

    def scenario_results(self) -> list[tuple[Scenario, Optional[BonusResult], Optional[Recommendation]]]:
        out = []
        for sc in SCENARIOS:
            result, rec = self.evaluate(sc.performance)
            out.append((sc, result, rec))
        custom = Scenario(CUSTOM_SCENARIO_ID, CUSTOM_SCENARIO_LABEL, tuple(self.performance), is_custom=True)
        out.append((custom, self.result, self.recommendation))
        return out
