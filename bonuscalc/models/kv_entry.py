from __future__ import annotations

from datetime import datetime
from sqlalchemy import Column, DateTime, String, Text

from bonuscalc.core.database import Base


class KeyValueEntry(Base):
    """
    Простое key-value хранилище настроек калькулятора.
    value — JSON строка: оклад, таблица ставок, последний ввод.
    """
    __tablename__ = "kv_entries"

    key = Column(String(64), primary_key=True)
    value = Column(Text, nullable=False)

    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow, nullable=False)
