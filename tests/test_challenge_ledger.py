from __future__ import annotations

from datetime import date

from conftest import make_snapshots
from profit_challenge.challenge.ledger import (
    delete_snapshot,
    edit_snapshot,
    find_snapshot,
    new_snapshot_id,
    upsert_snapshot,
)
from profit_challenge.challenge.normalize import normalize


def test_upsert_appends_new_date():
    snaps = make_snapshots(("2024-01-01", 1010.0))
    out = upsert_snapshot(snaps, date(2024, 1, 2), 1030.0, "note", snapshot_id="new")
    assert [s.id for s in out] == ["s0", "new"]
    assert out[1].notes == "note"
    assert len(snaps) == 1


def test_upsert_existing_date_replaces_and_keeps_id():
    snaps = make_snapshots(("2024-01-01", 1010.0), ("2024-01-02", 1020.0))
    out = upsert_snapshot(snaps, date(2024, 1, 2), 990.0, snapshot_id="ignored")
    assert [s.id for s in out] == ["s0", "s1"]
    assert out[1].account_value == 990.0
    assert snaps[1].account_value == 1020.0


def test_profit_rederived_after_mutation():
    snaps = make_snapshots(("2024-01-01", 1010.0), ("2024-01-02", 1020.0), ("2024-01-03", 1050.0))
    out = normalize(delete_snapshot(snaps, "s1"), 1000.0)
    assert [e.profit for e in out] == [10.0, 40.0]


def test_edit_keeps_id_and_changes_fields():
    snaps = make_snapshots(("2024-01-01", 1010.0))
    out = edit_snapshot(snaps, "s0", date(2024, 1, 3), 1111.0, "moved")
    assert len(out) == 1
    assert out[0].id == "s0"
    assert out[0].date == date(2024, 1, 3)
    assert out[0].notes == "moved"


def test_edit_onto_occupied_date_drops_other_snapshot():
    snaps = make_snapshots(("2024-01-01", 1010.0), ("2024-01-02", 1020.0))
    out = edit_snapshot(snaps, "s0", date(2024, 1, 2), 1005.0)
    assert [(s.id, s.date) for s in out] == [("s0", date(2024, 1, 2))]


def test_edit_unknown_id_is_noop():
    snaps = make_snapshots(("2024-01-01", 1010.0))
    assert edit_snapshot(snaps, "missing", date(2024, 1, 2), 1.0) == snaps


def test_find_and_delete():
    snaps = make_snapshots(("2024-01-01", 1010.0), ("2024-01-02", 1020.0))
    assert find_snapshot(snaps, "s1").account_value == 1020.0
    assert find_snapshot(snaps, "nope") is None
    assert [s.id for s in delete_snapshot(snaps, "s0")] == ["s1"]


def test_new_ids_are_unique():
    assert len({new_snapshot_id() for _ in range(50)}) == 50
