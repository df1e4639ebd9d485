"""Random assignment of the entrant pool to labelled groups."""

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
from typing import List, Set, Tuple

from bucketdraw.constants import GROUP_LABELS, GROUP_SIZE, POOL_SIZE
from bucketdraw.exceptions import DuplicateEntrantException, EntrantCountException
from bucketdraw.models import Group
from bucketdraw.type_hints import Entrant, Entrants, RandomSource
from bucketdraw.utils import setup_logger

logger = setup_logger(__name__)


def find_duplicates(entrants: Entrants) -> Set[Entrant]:
    """Return identifiers that appear more than once in the pool."""
    return {entrant for entrant, count in Counter(entrants).items() if count > 1}


def validate_pool_size(entrants: Entrants) -> None:
    """Raise :class:`EntrantCountException` unless the pool is full."""
    if len(entrants) != POOL_SIZE:
        raise EntrantCountException(observed=len(entrants), expected=POOL_SIZE)


class GroupAssigner:
    """Shuffle the entrant pool and slice it into groups A to D.

    Parameters
    ----------
    rng : RandomSource
        Randomness source used for the single shuffle. Pass a dedicated
        ``random.Random`` per draw; the assigner never touches the module
        level generator.
    strict : bool
        Reject pools with repeated identifiers. Off by default, in which case
        duplicates are only logged.
    """

    def __init__(self, rng: RandomSource, strict: bool = False):
        self.rng = rng
        self.strict = strict

    def assign(self, entrants: Entrants) -> Tuple[Group, ...]:
        """Return the groups in label order.

        Raises
        ------
        EntrantCountException
            If the pool does not hold exactly ``POOL_SIZE`` entrants. The
            randomness source is left untouched in that case.
        DuplicateEntrantException
            If ``strict`` is set and an identifier repeats.
        """
        validate_pool_size(entrants)

        duplicates = find_duplicates(entrants)
        if duplicates:
            if self.strict:
                raise DuplicateEntrantException(duplicates)
            logger.warning(
                "Entrant pool contains duplicates: %s", ", ".join(sorted(duplicates))
            )

        pool: List[Entrant] = list(entrants)
        self.rng.shuffle(pool)

        groups = tuple(
            Group(label=label, members=pool[i * GROUP_SIZE : (i + 1) * GROUP_SIZE])
            for i, label in enumerate(GROUP_LABELS)
        )
        for group in groups:
            logger.debug("Group %s: %s", group.label, ", ".join(group.members))
        return groups
