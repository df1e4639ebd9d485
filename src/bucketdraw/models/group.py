"""Group (bucket) value type."""

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
from typing import Iterator, Tuple

from bucketdraw.constants import GROUP_HEADER, GROUP_LABELS, GROUP_SIZE, TRIPLE_SIZE
from bucketdraw.exceptions import InvalidGroupException
from bucketdraw.type_hints import Entrant, GroupLabel


@dataclass(frozen=True)
class Group:
    """One labelled bucket of the draw.

    Members keep the position they were drawn in; the pairing generators
    index by that position. Construction fails with
    :class:`InvalidGroupException` unless there are exactly ``GROUP_SIZE``
    members and the label is one of ``GROUP_LABELS``.
    """

    label: GroupLabel
    members: Tuple[Entrant, ...]

    def __post_init__(self) -> None:
        # Accept any sequence but always store a tuple
        object.__setattr__(self, "members", tuple(self.members))
        if self.label not in GROUP_LABELS:
            raise InvalidGroupException(
                f"unknown group label {self.label!r}, expected one of {GROUP_LABELS}"
            )
        if len(self.members) != GROUP_SIZE:
            raise InvalidGroupException(
                f"group {self.label} needs {GROUP_SIZE} members, "
                f"got {len(self.members)}"
            )

    @property
    def header(self) -> str:
        return GROUP_HEADER.format(label=self.label)

    def triples(self) -> Iterator[Tuple[Entrant, ...]]:
        """Yield the consecutive positional triples of the group."""
        for start in range(0, GROUP_SIZE, TRIPLE_SIZE):
            yield self.members[start : start + TRIPLE_SIZE]

    def position_of(self, entrant: Entrant) -> int:
        return self.members.index(entrant)

    def __len__(self) -> int:
        return len(self.members)

    def __iter__(self) -> Iterator[Entrant]:
        return iter(self.members)

    def __getitem__(self, index: int) -> Entrant:
        return self.members[index]

    def __contains__(self, entrant: object) -> bool:
        return entrant in self.members


#  LocalWords:  Group
