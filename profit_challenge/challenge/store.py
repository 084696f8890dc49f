"""
Persistence + import/export for the challenge blob.

The blob uses camelCase keys so exported files stay interchangeable with
earlier JSON backups:

    {
      "config": {"startCapital": 1000, "goalType": "percent", "goalValue": 1, "startDate": "2024-01-01"},
      "entries": [{"id": "...", "date": "2024-01-02", "accountValue": 1010, "notes": "", "profit": 10}],
      "currency": "EUR"
    }

`profit` is written for readability only; it is always rederived on load.
The store file itself is a small key-value JSON object; the blob lives under
STORAGE_KEY so other namespaces can share the file.
"""
from __future__ import annotations

import json
import logging
from datetime import date
from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from profit_challenge.challenge.ledger import new_snapshot_id
from profit_challenge.challenge.models import ChallengeConfig, ChallengeState, Currency, GoalType, Snapshot
from profit_challenge.challenge.normalize import coerce_float, normalize
from profit_challenge.utils.dates import parse_iso_date

logger = logging.getLogger(__name__)

STORAGE_KEY = "daily-profit-challenge:v1"


class ChallengeStoreError(Exception):
    """Base error for challenge persistence and import."""


class PersistenceCorrupt(ChallengeStoreError):
    """Stored blob could not be parsed."""


class ImportInvalid(ChallengeStoreError):
    """Imported payload is missing required fields or is malformed."""


def _required_date(v: Any) -> date:
    if isinstance(v, date):
        return v
    d = parse_iso_date(str(v)) if v is not None else None
    if d is None:
        raise ValueError(f"invalid date: {v!r}")
    return d


class ConfigPayload(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    # None only when the key is absent; an explicit null coerces to 0.
    start_capital: float | None = Field(None, alias="startCapital")
    goal_type: GoalType = Field(GoalType.PERCENT, alias="goalType")
    goal_value: float = Field(0.0, alias="goalValue")
    start_date: date = Field(alias="startDate")

    @field_validator("start_capital", "goal_value", mode="before")
    @classmethod
    def _coerce_number(cls, v: Any) -> float:
        return coerce_float(v)

    @field_validator("goal_type", mode="before")
    @classmethod
    def _lower_goal_type(cls, v: Any) -> Any:
        return v.strip().lower() if isinstance(v, str) else v

    @field_validator("start_date", mode="before")
    @classmethod
    def _parse_start_date(cls, v: Any) -> date:
        return _required_date(v)

    def to_config(self) -> ChallengeConfig:
        return ChallengeConfig(
            start_capital=coerce_float(self.start_capital),
            goal_type=self.goal_type,
            goal_value=self.goal_value,
            start_date=self.start_date,
        )


class EntryPayload(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    id: str = Field(default_factory=new_snapshot_id)
    day: date = Field(alias="date")
    account_value: float = Field(0.0, alias="accountValue")
    notes: str = ""

    @field_validator("id", mode="before")
    @classmethod
    def _stringify_id(cls, v: Any) -> str:
        # Older exports used millisecond timestamps as ids.
        if v is None or v == "":
            return new_snapshot_id()
        return str(v)

    @field_validator("day", mode="before")
    @classmethod
    def _parse_date(cls, v: Any) -> date:
        return _required_date(v)

    @field_validator("account_value", mode="before")
    @classmethod
    def _coerce_number(cls, v: Any) -> float:
        return coerce_float(v)

    @field_validator("notes", mode="before")
    @classmethod
    def _notes(cls, v: Any) -> str:
        return "" if v is None else str(v)

    def to_snapshot(self) -> Snapshot:
        return Snapshot(id=self.id, date=self.day, account_value=self.account_value, notes=self.notes)


class ChallengePayload(BaseModel):
    model_config = ConfigDict(extra="ignore")

    config: ConfigPayload | None = None
    entries: list[EntryPayload] = Field(default_factory=list)
    currency: Currency = Currency.EUR

    @field_validator("entries", mode="before")
    @classmethod
    def _entries_list(cls, v: Any) -> Any:
        return [] if v is None else v

    @field_validator("currency", mode="before")
    @classmethod
    def _currency(cls, v: Any) -> Any:
        if v is None or v == "":
            return Currency.EUR
        return v.strip().upper() if isinstance(v, str) else v

    def to_state(self) -> ChallengeState:
        config = self.config.to_config() if self.config is not None else None
        # Entries are meaningless without a start capital to seed profit from.
        has_capital = self.config is not None and self.config.start_capital is not None
        entries = [e.to_snapshot() for e in self.entries] if has_capital else []
        return ChallengeState(config=config, entries=entries, currency=self.currency)


def state_to_blob(state: ChallengeState) -> dict[str, Any]:
    cfg = state.config
    blob: dict[str, Any] = {"config": None, "entries": [], "currency": state.currency.value}
    if cfg is None:
        return blob

    blob["config"] = {
        "startCapital": cfg.start_capital,
        "goalType": cfg.goal_type.value,
        "goalValue": cfg.goal_value,
        "startDate": cfg.start_date.isoformat(),
    }
    blob["entries"] = [
        {
            "id": e.id,
            "date": e.date.isoformat(),
            "accountValue": e.account_value,
            "notes": e.notes,
            "profit": e.profit,
        }
        for e in normalize(state.entries, cfg.start_capital)
    ]
    return blob


def parse_blob(raw: Any) -> ChallengeState:
    """Validate a decoded blob. Raises PersistenceCorrupt on any schema problem."""
    if raw is None:
        return ChallengeState()
    if not isinstance(raw, dict):
        raise PersistenceCorrupt(f"expected an object, got {type(raw).__name__}")
    try:
        return ChallengePayload.model_validate(raw).to_state()
    except ValidationError as e:
        raise PersistenceCorrupt(str(e)) from e


def export_state(state: ChallengeState) -> str:
    return json.dumps(state_to_blob(state), indent=2, ensure_ascii=False)


def import_state(text: str) -> ChallengeState:
    """
    Parse exported text back into a state.

    The payload must carry a `config` object and an `entries` list; anything
    else raises ImportInvalid and the caller keeps its current state.
    """
    try:
        raw = json.loads(text)
    except (json.JSONDecodeError, TypeError) as e:
        raise ImportInvalid(f"not valid JSON: {e}") from e

    if not isinstance(raw, dict) or not raw.get("config") or not isinstance(raw.get("entries"), list):
        raise ImportInvalid("payload needs a config object and an entries list")

    try:
        return ChallengePayload.model_validate(raw).to_state()
    except ValidationError as e:
        raise ImportInvalid(str(e)) from e


class ChallengeStore:
    """
    JSON-file key-value store holding the challenge blob under one namespace key.

    Load never fails: a missing file or key gives an uninitialized state, and a
    corrupt blob is logged and treated the same way.
    """

    def __init__(self, path: str | Path, key: str = STORAGE_KEY):
        self.path = Path(path)
        self.key = key

    def _read_all(self) -> dict[str, Any]:
        if not self.path.exists():
            return {}
        data = json.loads(self.path.read_text(encoding="utf-8"))
        if not isinstance(data, dict):
            raise PersistenceCorrupt(f"{self.path} does not hold a JSON object")
        return data

    def load(self) -> ChallengeState:
        try:
            data = self._read_all()
            return parse_blob(data.get(self.key))
        except (OSError, json.JSONDecodeError, PersistenceCorrupt) as exc:
            logger.warning("Ignoring unreadable challenge store %s: %s", self.path, exc)
            return ChallengeState()

    def save(self, state: ChallengeState) -> Path:
        try:
            data = self._read_all()
        except (json.JSONDecodeError, PersistenceCorrupt):
            logger.warning("Overwriting corrupt challenge store %s", self.path)
            data = {}
        data[self.key] = state_to_blob(state)
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self.path.write_text(json.dumps(data, indent=2, ensure_ascii=False), encoding="utf-8")
        return self.path

    def clear(self) -> None:
        try:
            data = self._read_all()
        except (json.JSONDecodeError, PersistenceCorrupt):
            data = {}
        if self.key not in data:
            return
        del data[self.key]
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self.path.write_text(json.dumps(data, indent=2, ensure_ascii=False), encoding="utf-8")
