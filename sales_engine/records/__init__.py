"""
Record Store — the five read-only CRM collections.

Modules:
    models        — Pydantic row models (camelCase aliases)
    record_store  — RecordStore loader and accessors
"""

from .models import Account, Activity, Deal, Rep, Target
from .record_store import RecordStore, RecordStoreError

__all__ = [
    "Account",
    "Activity",
    "Deal",
    "Rep",
    "Target",
    "RecordStore",
    "RecordStoreError",
]
