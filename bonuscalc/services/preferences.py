# bonuscalc/services/preferences.py
"""
Хранение пользовательских настроек калькулятора в key-value хранилище.

Ключи (значение — JSON):
  monthly_salary      — оклад, от него считаются пороги
  tier_rates          — {"monthly": [4 ставки], "quarterly": [4 ставки]}
  performance_inputs  — последний ввод: [m1, m2, m3]

Любая ошибка чтения/парсинга -> warning в лог и дефолт. Пользователю не показываем.
"""
from __future__ import annotations

import json
import logging
from decimal import Decimal
from typing import Optional, Protocol

from sqlalchemy.orm import Session

from bonuscalc.core.config import settings
from bonuscalc.core.money import to_amount
from bonuscalc.core.tier_rules import SCHEMES, TIER_COUNT, RateTable, default_rate_table
from bonuscalc.models.kv_entry import KeyValueEntry

logger = logging.getLogger(__name__)

SALARY_KEY = "monthly_salary"
RATES_KEY = "tier_rates"
PERFORMANCE_KEY = "performance_inputs"
ALL_KEYS = (SALARY_KEY, RATES_KEY, PERFORMANCE_KEY)


class KeyValueStore(Protocol):
    def get(self, key: str) -> Optional[str]: ...

    def set(self, key: str, value: str) -> None: ...

    def delete(self, key: str) -> None: ...


class MemoryKeyValueStore:
    def __init__(self, initial: dict[str, str] | None = None):
        self.data: dict[str, str] = dict(initial or {})

    def get(self, key: str) -> Optional[str]:
        return self.data.get(key)

    def set(self, key: str, value: str) -> None:
        self.data[key] = value

    def delete(self, key: str) -> None:
        self.data.pop(key, None)


class SqlKeyValueStore:
    def __init__(self, db: Session):
        self.db = db

    def get(self, key: str) -> Optional[str]:
        row = self.db.get(KeyValueEntry, key)
        return row.value if row else None

    def set(self, key: str, value: str) -> None:
        row = self.db.get(KeyValueEntry, key)
        if row:
            row.value = value
        else:
            self.db.add(KeyValueEntry(key=key, value=value))
        self.db.commit()

    def delete(self, key: str) -> None:
        row = self.db.get(KeyValueEntry, key)
        if row:
            self.db.delete(row)
            self.db.commit()


# ── defaults ──────────────────────────────────────────────────
def default_salary() -> Decimal:
    return Decimal(str(settings.DEFAULT_MONTHLY_SALARY))


def default_rates() -> RateTable:
    return default_rate_table(settings.DEFAULT_RATES_PERCENT)


def default_performance() -> list:
    return ["", "", ""]


# ── low level ─────────────────────────────────────────────────
def _read_json(store: KeyValueStore, key: str):
    """None если ключа нет или JSON битый."""
    try:
        raw = store.get(key)
    except Exception as e:
        logger.warning("preferences: failed to read %s: %s", key, e)
        return None
    if raw is None:
        return None
    try:
        return json.loads(raw)
    except (TypeError, ValueError) as e:
        logger.warning("preferences: bad JSON under %s, using defaults: %s", key, e)
        return None


def _write_json(store: KeyValueStore, key: str, value) -> None:
    store.set(key, json.dumps(value, ensure_ascii=False))


def _to_jsonable(value):
    if isinstance(value, Decimal):
        return float(value)
    return value


# ── salary ────────────────────────────────────────────────────
def load_salary(store: KeyValueStore) -> Decimal:
    raw = _read_json(store, SALARY_KEY)
    if raw is None:
        return default_salary()
    salary = to_amount(raw)
    if salary <= 0:
        logger.warning("preferences: stored salary %r is not positive, using default", raw)
        return default_salary()
    return salary


def save_salary(store: KeyValueStore, salary) -> None:
    _write_json(store, SALARY_KEY, _to_jsonable(salary))


# ── rates ─────────────────────────────────────────────────────
def _parse_rates(raw) -> RateTable | None:
    if not isinstance(raw, dict):
        return None
    table: RateTable = {}
    for scheme in SCHEMES:
        rates = raw.get(scheme)
        if not isinstance(rates, list) or len(rates) != TIER_COUNT:
            return None
        parsed = []
        for r in rates:
            if isinstance(r, bool) or not isinstance(r, (int, float)):
                return None
            value = Decimal(str(r))
            if not value.is_finite() or value < 0:
                return None
            parsed.append(value)
        table[scheme] = parsed
    return table


def load_rates(store: KeyValueStore) -> RateTable:
    raw = _read_json(store, RATES_KEY)
    if raw is None:
        return default_rates()
    table = _parse_rates(raw)
    if table is None:
        logger.warning("preferences: stored rate table has unexpected shape, using defaults")
        return default_rates()
    return table


def save_rates(store: KeyValueStore, table: RateTable) -> None:
    _write_json(
        store,
        RATES_KEY,
        {scheme: [_to_jsonable(r) for r in table[scheme]] for scheme in SCHEMES},
    )


# ── performance ───────────────────────────────────────────────
def load_performance(store: KeyValueStore) -> list:
    raw = _read_json(store, PERFORMANCE_KEY)
    if raw is None:
        return default_performance()
    if (
        not isinstance(raw, list)
        or len(raw) != 3
        or any(v is not None and not isinstance(v, (str, int, float)) for v in raw)
    ):
        logger.warning("preferences: stored performance inputs have unexpected shape, using defaults")
        return default_performance()
    return raw


def save_performance(store: KeyValueStore, values) -> None:
    _write_json(store, PERFORMANCE_KEY, [_to_jsonable(v) for v in values])


def reset(store: KeyValueStore) -> None:
    for key in ALL_KEYS:
        store.delete(key)
    logger.info("preferences: all calculator keys cleared")
