"""
Snapshot list mutations.

Every operation returns a new list and leaves its input untouched. Profit is
never patched here; callers re-run `normalize` over the result.
"""
from __future__ import annotations

import uuid
from datetime import date
from typing import Sequence

from profit_challenge.challenge.models import Snapshot
from profit_challenge.challenge.normalize import coerce_float


def new_snapshot_id() -> str:
    return uuid.uuid4().hex


def find_snapshot(snapshots: Sequence[Snapshot], snapshot_id: str) -> Snapshot | None:
    for s in snapshots:
        if s.id == snapshot_id:
            return s
    return None


def upsert_snapshot(
    snapshots: Sequence[Snapshot],
    day: date,
    account_value: float,
    notes: str = "",
    snapshot_id: str | None = None,
) -> list[Snapshot]:
    """Insert a snapshot, replacing any existing one on the same date (its id is kept)."""
    out = list(snapshots)
    for i, s in enumerate(out):
        if s.date == day:
            out[i] = Snapshot(id=s.id, date=day, account_value=coerce_float(account_value), notes=notes or "")
            return out
    out.append(
        Snapshot(
            id=snapshot_id or new_snapshot_id(),
            date=day,
            account_value=coerce_float(account_value),
            notes=notes or "",
        )
    )
    return out


def edit_snapshot(
    snapshots: Sequence[Snapshot],
    snapshot_id: str,
    day: date,
    account_value: float,
    notes: str = "",
) -> list[Snapshot]:
    """
    Replace the snapshot with `snapshot_id`, keeping its id.

    If the new date belongs to a different snapshot, that one is dropped so
    there is still at most one snapshot per date. Unknown ids are a no-op.
    """
    if find_snapshot(snapshots, snapshot_id) is None:
        return list(snapshots)

    edited = Snapshot(id=snapshot_id, date=day, account_value=coerce_float(account_value), notes=notes or "")
    out: list[Snapshot] = []
    for s in snapshots:
        if s.id == snapshot_id:
            out.append(edited)
        elif s.date == day:
            continue
        else:
            out.append(s)
    return out


def delete_snapshot(snapshots: Sequence[Snapshot], snapshot_id: str) -> list[Snapshot]:
    return [s for s in snapshots if s.id != snapshot_id]
