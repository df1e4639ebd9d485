import pytest

from bucketdraw.exceptions import (
    EntrantNotFoundException,
    InvalidGroupException,
    SelfPairingException,
)
from bucketdraw.draw import build_pairings
from bucketdraw.models import Draw, Group, Pairing


def test_pairing_rejects_self_pairing():
    with pytest.raises(SelfPairingException):
        Pairing("T1", "T1")


def test_pairing_is_unordered_but_keeps_listing_order():
    pairing = Pairing("T3", "T1")
    assert pairing == Pairing("T1", "T3")
    assert hash(pairing) == hash(Pairing("T1", "T3"))
    assert str(pairing) == "T3 - T1"
    assert pairing.as_tuple() == ("T3", "T1")


def test_pairing_opponent_of():
    pairing = Pairing("T1", "T2")
    assert pairing.opponent_of("T1") == "T2"
    assert pairing.opponent_of("T2") == "T1"
    with pytest.raises(ValueError):
        pairing.opponent_of("T3")


@pytest.mark.parametrize("size", [0, 8, 10])
def test_group_requires_nine_members(size):
    with pytest.raises(InvalidGroupException):
        Group("A", [f"T{i}" for i in range(size)])


def test_group_rejects_unknown_label(entrants):
    with pytest.raises(InvalidGroupException):
        Group("E", entrants[:9])


def test_group_keeps_positions_and_triples(entrants):
    group = Group("B", entrants[9:18])
    assert group.header == "Bucket B:"
    assert len(group) == 9
    assert group[0] == "T10"
    assert group.position_of("T18") == 8
    assert "T12" in group
    assert list(group.triples()) == [
        ("T10", "T11", "T12"),
        ("T13", "T14", "T15"),
        ("T16", "T17", "T18"),
    ]


def test_group_is_immutable(entrants):
    group = Group("A", entrants[:9])
    with pytest.raises(AttributeError):
        group.label = "B"


def _draw(groups):
    return Draw(groups=groups, pairings=tuple(build_pairings(groups)))


def test_draw_lookups(fixed_groups):
    draw = _draw(fixed_groups)
    assert draw.group("C") is fixed_groups[2]
    assert draw.group_of("T20").label == "C"
    with pytest.raises(InvalidGroupException):
        draw.group("Z")
    with pytest.raises(EntrantNotFoundException):
        draw.group_of("Nobody")


def test_draw_splits_intra_and_cross_pairings(fixed_groups):
    draw = _draw(fixed_groups)
    assert len(draw.intra_group_pairings) == 36
    assert len(draw.cross_group_pairings) == 108
    assert str(draw.cross_group_pairings[0]) == "T1 - T10"


def test_matches_for_entrant(fixed_groups):
    draw = _draw(fixed_groups)
    opponents = [p.opponent_of("T1") for p in draw.matches_for("T1")]
    assert opponents == ["T2", "T3", "T10", "T11", "T19", "T20", "T28", "T29"]
    with pytest.raises(EntrantNotFoundException):
        draw.matches_for("Nobody")


def test_draw_to_dict(fixed_groups):
    data = _draw(fixed_groups).to_dict()
    assert list(data["groups"]) == ["A", "B", "C", "D"]
    assert data["groups"]["D"][0] == "T28"
    assert len(data["matches"]) == 144
    assert data["matches"][1] == ["T3", "T1"]


def test_unchecked_pairing_allows_self_pairing():
    pairing = Pairing.unchecked("T1", "T1")
    assert pairing.is_self_pairing
    assert str(pairing) == "T1 - T1"
    assert not Pairing("T1", "T2").is_self_pairing
