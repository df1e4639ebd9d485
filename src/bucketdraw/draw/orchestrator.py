"""Sequencing of one complete draw."""

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

import random
from typing import Dict, List, Optional, Sequence

from bucketdraw.constants import CROSS_GROUP_ORDER, TOTAL_PAIRINGS
from bucketdraw.draw.assigner import GroupAssigner
from bucketdraw.draw.pairings import (
    generate_cross_group_pairings,
    generate_intra_group_pairings,
)
from bucketdraw.models import Draw, Group, Pairing
from bucketdraw.type_hints import Entrants, RandomSource
from bucketdraw.utils import setup_logger

logger = setup_logger(__name__)


def build_pairings(groups: Sequence[Group]) -> List[Pairing]:
    """Generate the full match list for already assigned groups.

    Intra-group pairings come first, group by group in the given order, then
    the cross-group pairings for every entry of ``CROSS_GROUP_ORDER`` with the
    first listed group as primary. The result depends only on the groups, so
    it is reproducible for a fixed assignment.
    """
    by_label: Dict[str, Group] = {group.label: group for group in groups}

    pairings: List[Pairing] = []
    for group in groups:
        pairings.extend(generate_intra_group_pairings(group))

    for primary_label, secondary_label in CROSS_GROUP_ORDER:
        pairings.extend(
            generate_cross_group_pairings(
                by_label[primary_label], by_label[secondary_label]
            )
        )
    return pairings


class DrawOrchestrator:
    """Run group assignment and pairing generation as one pass."""

    def __init__(self, assigner: GroupAssigner):
        self.assigner = assigner

    def run(self, entrants: Entrants) -> Draw:
        """Draw the groups and schedule every match.

        Args:
            entrants: The full entrant pool

        Returns:
            The immutable draw

        Raises:
            ValidationException: If the pool cannot be split into groups
        """
        groups = self.assigner.assign(entrants)
        pairings = build_pairings(groups)
        if len(pairings) != TOTAL_PAIRINGS:
            logger.warning(
                "Generated %s pairings, expected %s", len(pairings), TOTAL_PAIRINGS
            )
        self_pairings = [str(p) for p in pairings if p.is_self_pairing]
        if self_pairings:
            logger.warning(
                "Duplicate entrants paired with themselves: %s",
                ", ".join(self_pairings),
            )
        logger.info("Drew %s groups with %s pairings", len(groups), len(pairings))
        return Draw(groups=groups, pairings=tuple(pairings))


def create_draw(
    entrants: Entrants,
    rng: Optional[RandomSource] = None,
    seed: Optional[int] = None,
    strict: bool = False,
) -> Draw:
    """Convenience wrapper building a fresh orchestrator for one draw.

    Args:
        entrants: The full entrant pool
        rng: Randomness source to use; a new ``random.Random(seed)`` when omitted
        seed: Seed for the generated randomness source, ignored when ``rng`` is given
        strict: Reject duplicate entrants

    Returns:
        The immutable draw
    """
    if rng is None:
        rng = random.Random(seed)
    return DrawOrchestrator(GroupAssigner(rng, strict=strict)).run(entrants)
