import pytest

from bucketdraw.models import Group


class IdentityRandom:
    """Randomness source that leaves the pool in input order."""

    def __init__(self):
        self.calls = 0

    def shuffle(self, x):
        self.calls += 1


class ReversingRandom:
    """Randomness source that reverses the pool."""

    def shuffle(self, x):
        x.reverse()


def make_entrants(count=36, prefix="T"):
    return [f"{prefix}{i}" for i in range(1, count + 1)]


@pytest.fixture
def entrants():
    return make_entrants()


@pytest.fixture
def identity_rng():
    return IdentityRandom()


@pytest.fixture
def fixed_groups(entrants):
    return tuple(
        Group(label, entrants[i * 9 : (i + 1) * 9])
        for i, label in enumerate("ABCD")
    )


@pytest.fixture
def entrants_file(tmp_path, entrants):
    path = tmp_path / "teams.txt"
    path.write_text("\n".join(entrants) + "\n", encoding="utf-8")
    return path
