"""Pairing generation within and across groups."""

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

from typing import List

from bucketdraw.constants import GROUP_SIZE
from bucketdraw.models import Group, Pairing


def generate_intra_group_pairings(group: Group) -> List[Pairing]:
    """Pair every entrant with the other two members of its triple.

    The group is split into the triples at positions 0-2, 3-5 and 6-8. A
    triple ``(x, y, z)`` yields ``x - y``, ``z - x`` and ``y - z``, so each of
    its three edges appears exactly once.

    Args:
        group: Group to pair, in drawn position order

    Returns:
        Nine pairings, triple by triple
    """
    pairings = []
    for x, y, z in group.triples():
        pairings.extend(
            (
                Pairing.unchecked(x, y),
                Pairing.unchecked(z, x),
                Pairing.unchecked(y, z),
            )
        )
    return pairings


def generate_cross_group_pairings(primary: Group, secondary: Group) -> List[Pairing]:
    """Pair two groups position by position with a one-step offset.

    For each position ``i`` the primary entrant meets the secondary entrant
    at ``i`` (aligned) and the one at ``(i + 1) % 9`` (offset). Swapping the
    two groups changes the offset pairings, so callers must keep a fixed
    primary/secondary order.

    Args:
        primary: Group whose positions drive the iteration
        secondary: Group supplying the aligned and offset opponents

    Returns:
        Eighteen pairings, aligned then offset for each position
    """
    pairings = []
    for i in range(GROUP_SIZE):
        pairings.append(Pairing.unchecked(primary[i], secondary[i]))
        pairings.append(
            Pairing.unchecked(secondary[(i + 1) % GROUP_SIZE], primary[i])
        )
    return pairings
