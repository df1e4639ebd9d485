"""Type hints used in Bucket Draw."""

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

from typing import List, Literal, Protocol, Sequence, Tuple

# A participant identifier, e.g. a team name
Entrant = str
Entrants = Sequence[Entrant]

# Group labels, in draw order
GroupLabel = Literal["A", "B", "C", "D"]

OutputFormat = Literal["text", "json"]

# Pairing in emission order, as written to the report
PairingIDs = Tuple[Entrant, Entrant]


class RandomSource(Protocol):
    """Anything that can shuffle a list in place, e.g. ``random.Random``."""

    def shuffle(self, x: List[Entrant]) -> None: ...


#  LocalWords:  PairingIDs RandomSource
