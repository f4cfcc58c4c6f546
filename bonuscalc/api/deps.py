from __future__ import annotations

from fastapi import Depends
from sqlalchemy.orm import Session

from bonuscalc.core.database import get_db
from bonuscalc.services.calculator import CalculatorState
from bonuscalc.services.preferences import KeyValueStore, SqlKeyValueStore


def get_store(db: Session = Depends(get_db)) -> KeyValueStore:
    return SqlKeyValueStore(db)


def get_state(store: KeyValueStore = Depends(get_store)) -> CalculatorState:
    return CalculatorState.load(store)
