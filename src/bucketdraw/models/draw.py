"""Draw data class."""

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

from collections import Counter
from dataclasses import dataclass
from typing import Any, Dict, List, Tuple

from bucketdraw.constants import GROUP_COUNT, INTRA_PAIRINGS_PER_GROUP
from bucketdraw.exceptions import EntrantNotFoundException, InvalidGroupException
from bucketdraw.models.group import Group
from bucketdraw.models.pairing import Pairing
from bucketdraw.type_hints import Entrant, GroupLabel


@dataclass(frozen=True)
class Draw:
    """Complete outcome of one draw.

    Attributes
    ----------
    groups : tuple of Group
        The buckets in label order (A, B, C, D).
    pairings : tuple of Pairing
        Every scheduled match, in generation order: the intra-group pairings
        of each group first, then the cross-group pairings.
    """

    groups: Tuple[Group, ...]
    pairings: Tuple[Pairing, ...]

    def __post_init__(self) -> None:
        object.__setattr__(self, "groups", tuple(self.groups))
        object.__setattr__(self, "pairings", tuple(self.pairings))

    @property
    def entrants(self) -> List[Entrant]:
        """All entrants, group by group, in drawn position order."""
        return [entrant for group in self.groups for entrant in group]

    @property
    def intra_group_pairings(self) -> Tuple[Pairing, ...]:
        return self.pairings[: GROUP_COUNT * INTRA_PAIRINGS_PER_GROUP]

    @property
    def cross_group_pairings(self) -> Tuple[Pairing, ...]:
        return self.pairings[GROUP_COUNT * INTRA_PAIRINGS_PER_GROUP :]

    def group(self, label: GroupLabel) -> Group:
        """Return the group with the given label."""
        for group in self.groups:
            if group.label == label:
                return group
        raise InvalidGroupException(f"no group labelled {label!r} in this draw")

    def group_of(self, entrant: Entrant) -> Group:
        """Return the group the entrant was drawn into."""
        for group in self.groups:
            if entrant in group:
                return group
        raise EntrantNotFoundException(f"{entrant!r} is not part of this draw")

    def matches_for(self, entrant: Entrant) -> List[Pairing]:
        """Return the entrant's pairings in generation order."""
        # Raises for unknown entrants instead of returning an empty schedule
        self.group_of(entrant)
        return [pairing for pairing in self.pairings if pairing.involves(entrant)]

    def match_counts(self) -> Dict[Entrant, int]:
        """Count pairings per entrant."""
        counts: Counter = Counter({entrant: 0 for entrant in self.entrants})
        for pairing in self.pairings:
            counts[pairing.first] += 1
            counts[pairing.second] += 1
        return dict(counts)

    def to_dict(self) -> Dict[str, Any]:
        """Serialize draw to dictionary."""
        return {
            "groups": {group.label: list(group.members) for group in self.groups},
            "matches": [pairing.to_list() for pairing in self.pairings],
        }


#  LocalWords:  Draw
