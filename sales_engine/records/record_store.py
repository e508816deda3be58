"""
Record Store — Immutable in-memory CRM collections.

Loads the five static JSON collections (accounts, reps, deals, activities,
targets) once, validates every row against its pydantic model, and keeps
each collection as a pandas DataFrame with camelCase columns.

Accessors hand out copies, so the metric functions can filter and add
columns freely without ever touching the store itself.
"""

from __future__ import annotations

import json
import logging
import os
from typing import Any

import pandas as pd
from pydantic import BaseModel, ValidationError

from ..config import (
    ACCOUNTS_FILE,
    ACTIVITIES_FILE,
    DEALS_FILE,
    REPS_FILE,
    TARGETS_FILE,
)
from .models import Account, Activity, Deal, Rep, Target

logger = logging.getLogger(__name__)


class RecordStoreError(RuntimeError):
    """Raised when a source collection is missing or malformed. Fatal at startup."""


# name -> (file name, row model, columns, date columns)
COLLECTIONS: dict[str, tuple[str, type[BaseModel], list[str], list[str]]] = {
    "accounts": (
        ACCOUNTS_FILE, Account,
        ["id", "name", "segment", "status", "createdAt"],
        ["createdAt"],
    ),
    "reps": (
        REPS_FILE, Rep,
        ["id", "name", "email", "team", "hireDate"],
        ["hireDate"],
    ),
    "deals": (
        DEALS_FILE, Deal,
        ["id", "accountId", "repId", "value", "status", "stage", "createdAt", "closedAt"],
        ["createdAt", "closedAt"],
    ),
    "activities": (
        ACTIVITIES_FILE, Activity,
        ["id", "accountId", "repId", "type", "date", "notes"],
        ["date"],
    ),
    "targets": (
        TARGETS_FILE, Target,
        ["month", "target"],
        [],
    ),
}


def _build_frame(name: str, rows: Any) -> pd.DataFrame:
    """Validate raw rows for collection *name* and return them as a DataFrame."""
    fname, model, columns, date_columns = COLLECTIONS[name]

    if not isinstance(rows, list):
        raise RecordStoreError(f"{fname}: expected a JSON array, got {type(rows).__name__}")

    validated: list[dict] = []
    for i, row in enumerate(rows):
        if not isinstance(row, dict):
            raise RecordStoreError(f"{fname}: row {i} is not an object")
        try:
            record = model.model_validate(row)
        except ValidationError as exc:
            raise RecordStoreError(f"{fname}: row {i} is invalid: {exc}") from exc
        validated.append(record.model_dump(by_alias=True))

    df = pd.DataFrame(validated, columns=columns)
    for col in date_columns:
        df[col] = pd.to_datetime(df[col], errors="coerce")

    if name == "targets":
        dupes = df.loc[df["month"].duplicated(), "month"].tolist()
        if dupes:
            raise RecordStoreError(f"{fname}: duplicate target months {dupes}")
        df["target"] = df["target"].astype(float)
    if name == "deals":
        df["value"] = df["value"].astype(float)

    return df


class RecordStore:
    """
    Read-only holder of the five CRM collections.

    Usage:
        store = RecordStore.from_directory("data/")
        deals = store.get_deals()
    """

    def __init__(
        self,
        accounts: pd.DataFrame,
        reps: pd.DataFrame,
        deals: pd.DataFrame,
        activities: pd.DataFrame,
        targets: pd.DataFrame,
    ):
        self._accounts = accounts
        self._reps = reps
        self._deals = deals
        self._activities = activities
        self._targets = targets

    # ------------------------------------------------------------------
    # Construction
    # ------------------------------------------------------------------

    @classmethod
    def from_records(
        cls,
        accounts: list[dict] | None = None,
        reps: list[dict] | None = None,
        deals: list[dict] | None = None,
        activities: list[dict] | None = None,
        targets: list[dict] | None = None,
    ) -> "RecordStore":
        """Build a store from in-memory row dicts (same validation as files)."""
        return cls(
            accounts=_build_frame("accounts", accounts or []),
            reps=_build_frame("reps", reps or []),
            deals=_build_frame("deals", deals or []),
            activities=_build_frame("activities", activities or []),
            targets=_build_frame("targets", targets or []),
        )

    @classmethod
    def from_directory(cls, data_dir: str) -> "RecordStore":
        """
        Load all five collections from *data_dir*.

        Raises:
            RecordStoreError: if any file is missing, not valid JSON,
                              or contains an invalid row.
        """
        frames: dict[str, pd.DataFrame] = {}

        for name, (fname, _, _, _) in COLLECTIONS.items():
            path = os.path.join(data_dir, fname)
            if not os.path.isfile(path):
                raise RecordStoreError(f"Missing data file: {path}")

            try:
                with open(path, "r", encoding="utf-8") as f:
                    rows = json.load(f)
            except (OSError, json.JSONDecodeError) as exc:
                raise RecordStoreError(f"{fname}: could not read JSON: {exc}") from exc

            frames[name] = _build_frame(name, rows)

        store = cls(**frames)
        logger.info("Record store loaded from %s: %s", data_dir, store.counts())
        return store

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def get_accounts(self) -> pd.DataFrame:
        return self._accounts.copy()

    def get_reps(self) -> pd.DataFrame:
        return self._reps.copy()

    def get_deals(self) -> pd.DataFrame:
        return self._deals.copy()

    def get_activities(self) -> pd.DataFrame:
        return self._activities.copy()

    def get_targets(self) -> pd.DataFrame:
        return self._targets.copy()

    def get_account_by_id(self, account_id: str) -> dict | None:
        return self._find_by_id(self._accounts, account_id)

    def get_rep_by_id(self, rep_id: str) -> dict | None:
        return self._find_by_id(self._reps, rep_id)

    def counts(self) -> dict[str, int]:
        """Row count per collection."""
        return {
            "accounts": len(self._accounts),
            "reps": len(self._reps),
            "deals": len(self._deals),
            "activities": len(self._activities),
            "targets": len(self._targets),
        }

    # ------------------------------------------------------------------
    # Internal
    # ------------------------------------------------------------------

    @staticmethod
    def _find_by_id(df: pd.DataFrame, row_id: str) -> dict | None:
        match = df[df["id"] == row_id]
        if match.empty:
            return None
        return match.iloc[0].to_dict()
