"""Pairing value type."""

# Bucket Draw
# Copyright (C) 2025  Bucket Draw developers
#
# This program is free software: you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation, either version 3 of the License, or
# (at your option) any later version.
#
# This program is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
# GNU General Public License for more details.
#
# You should have received a copy of the GNU General Public License
# along with this program.  If not, see <http://www.gnu.org/licenses/>.

from dataclasses import dataclass
from typing import Any, FrozenSet, List

from bucketdraw.constants import PAIRING_SEPARATOR
from bucketdraw.exceptions import SelfPairingException
from bucketdraw.type_hints import Entrant, PairingIDs


@dataclass(frozen=True, eq=False)
class Pairing:
    """A scheduled match between two distinct entrants.

    Attributes
    ----------
    first : str
        Entrant listed first in the report line.
    second : str
        Entrant listed second in the report line.

    Notes
    -----
    The listing order is kept for rendering only. Equality and hashing treat
    the pairing as unordered, so ``Pairing("x", "y") == Pairing("y", "x")``.
    """

    first: Entrant
    second: Entrant

    def __post_init__(self) -> None:
        if self.first == self.second:
            raise SelfPairingException(f"cannot pair {self.first!r} with itself")

    @classmethod
    def unchecked(cls, first: Entrant, second: Entrant) -> "Pairing":
        """Build a pairing without the self-pairing check.

        Used by the generators, which pair by position: a duplicated entrant
        ends up paired with itself instead of aborting the draw.
        """
        pairing = object.__new__(cls)
        object.__setattr__(pairing, "first", first)
        object.__setattr__(pairing, "second", second)
        return pairing

    @property
    def is_self_pairing(self) -> bool:
        return self.first == self.second

    @property
    def key(self) -> FrozenSet[Entrant]:
        """Unordered identity of the pairing."""
        return frozenset((self.first, self.second))

    def involves(self, entrant: Entrant) -> bool:
        return entrant == self.first or entrant == self.second

    def opponent_of(self, entrant: Entrant) -> Entrant:
        """Return the other side of the pairing."""
        if entrant == self.first:
            return self.second
        if entrant == self.second:
            return self.first
        raise ValueError(f"{entrant!r} is not part of {self}")

    def as_tuple(self) -> PairingIDs:
        return (self.first, self.second)

    def to_list(self) -> List[Any]:
        """Serialize pairing to a JSON-friendly list."""
        return [self.first, self.second]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Pairing):
            return NotImplemented
        return self.key == other.key

    def __hash__(self) -> int:
        return hash(self.key)

    def __str__(self) -> str:
        return f"{self.first}{PAIRING_SEPARATOR}{self.second}"


#  LocalWords:  Pairing
