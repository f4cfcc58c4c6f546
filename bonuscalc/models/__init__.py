# bonuscalc/models/__init__.py
from bonuscalc.models.kv_entry import KeyValueEntry

__all__ = ["KeyValueEntry"]
