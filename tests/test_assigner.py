import logging
import random

import pytest

from bucketdraw.draw import GroupAssigner, find_duplicates
from bucketdraw.exceptions import DuplicateEntrantException, EntrantCountException

from conftest import ReversingRandom, make_entrants


def _assert_partition(groups, entrants):
    members = [entrant for group in groups for entrant in group]
    assert [group.label for group in groups] == ["A", "B", "C", "D"]
    assert all(len(group) == 9 for group in groups)
    assert len(members) == len(set(members))
    assert set(members) == set(entrants)


def test_identity_shuffle_slices_in_order(entrants, identity_rng):
    groups = GroupAssigner(identity_rng).assign(entrants)

    assert list(groups[0]) == entrants[0:9]
    assert list(groups[1]) == entrants[9:18]
    assert list(groups[2]) == entrants[18:27]
    assert list(groups[3]) == entrants[27:36]
    assert identity_rng.calls == 1


def test_assign_uses_shuffled_order(entrants):
    groups = GroupAssigner(ReversingRandom()).assign(entrants)
    assert list(groups[0]) == list(reversed(entrants))[:9]


def test_assign_does_not_mutate_input(entrants):
    original = list(entrants)
    GroupAssigner(random.Random(5)).assign(entrants)
    assert entrants == original


@pytest.mark.parametrize("seed", [0, 1, 42, 2025, 123456])
def test_groups_partition_the_pool(entrants, seed):
    groups = GroupAssigner(random.Random(seed)).assign(entrants)
    _assert_partition(groups, entrants)


def test_same_seed_same_groups(entrants):
    first = GroupAssigner(random.Random(99)).assign(entrants)
    second = GroupAssigner(random.Random(99)).assign(entrants)
    assert first == second


def test_different_seeds_shuffle_differently(entrants):
    first = GroupAssigner(random.Random(1)).assign(entrants)
    second = GroupAssigner(random.Random(2)).assign(entrants)
    assert first != second


@pytest.mark.parametrize("count", [0, 35, 37])
def test_wrong_pool_size_fails_before_shuffling(identity_rng, count):
    with pytest.raises(EntrantCountException) as exc_info:
        GroupAssigner(identity_rng).assign(make_entrants(count))

    assert exc_info.value.observed == count
    assert exc_info.value.expected == 36
    assert str(count) in str(exc_info.value)
    assert identity_rng.calls == 0


def test_duplicates_are_logged_not_rejected(identity_rng, caplog):
    pool = make_entrants(35) + ["T1"]
    with caplog.at_level(logging.WARNING):
        groups = GroupAssigner(identity_rng).assign(pool)

    assert groups[3][8] == "T1"
    assert "duplicates" in caplog.text


def test_strict_mode_rejects_duplicates(identity_rng):
    pool = make_entrants(34) + ["T1", "T2"]
    with pytest.raises(DuplicateEntrantException) as exc_info:
        GroupAssigner(identity_rng, strict=True).assign(pool)

    assert exc_info.value.duplicates == ["T1", "T2"]
    assert identity_rng.calls == 0


def test_find_duplicates():
    assert find_duplicates(["a", "b", "a", "c", "b"]) == {"a", "b"}
    assert find_duplicates(make_entrants()) == set()
