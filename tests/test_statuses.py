from __future__ import annotations

from battlesim.core.types import StatusKind
from battlesim.domain.statuses import STATUS_CAPACITY, apply_status_no_stack, remove_status


def test_apply_status_no_stack_prevents_duplicates() -> None:
    statuses: list[StatusKind] = []
    applied_first = apply_status_no_stack(statuses, "poison")
    applied_second = apply_status_no_stack(statuses, "poison")

    assert applied_first is True
    assert applied_second is False
    assert statuses == ["poison"]


def test_apply_status_keeps_insertion_order() -> None:
    statuses: list[StatusKind] = []
    for kind in ("burn", "stun", "poison"):
        apply_status_no_stack(statuses, kind)

    assert statuses == ["burn", "stun", "poison"]


def test_apply_status_drops_inserts_beyond_capacity() -> None:
    statuses: list[StatusKind] = ["poison", "burn"]

    assert apply_status_no_stack(statuses, "stun", capacity=2) is False
    assert statuses == ["poison", "burn"]


def test_all_kinds_fit_within_default_capacity() -> None:
    statuses: list[StatusKind] = []
    for kind in ("poison", "burn", "stun", "shield", "haste"):
        assert apply_status_no_stack(statuses, kind) is True

    assert len(statuses) == STATUS_CAPACITY
    assert apply_status_no_stack(statuses, "burn") is False
    assert len(statuses) == STATUS_CAPACITY


def test_remove_status_reports_whether_present() -> None:
    statuses: list[StatusKind] = ["shield"]

    assert remove_status(statuses, "shield") is True
    assert remove_status(statuses, "shield") is False
    assert statuses == []
