"""Group assignment and pairing generation."""

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

from bucketdraw.draw.assigner import GroupAssigner, find_duplicates
from bucketdraw.draw.orchestrator import DrawOrchestrator, build_pairings, create_draw
from bucketdraw.draw.pairings import (
    generate_cross_group_pairings,
    generate_intra_group_pairings,
)

__all__ = [
    "GroupAssigner",
    "DrawOrchestrator",
    "build_pairings",
    "create_draw",
    "find_duplicates",
    "generate_intra_group_pairings",
    "generate_cross_group_pairings",
]
