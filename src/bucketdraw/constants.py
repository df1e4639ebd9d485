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

# --- Draw format ---
GROUP_COUNT = 4
GROUP_SIZE = 9
POOL_SIZE = GROUP_COUNT * GROUP_SIZE
TRIPLE_SIZE = 3

GROUP_LABELS = ("A", "B", "C", "D")

# Unordered group pairs, first listed group is the primary side
CROSS_GROUP_ORDER = (
    ("A", "B"),
    ("A", "C"),
    ("A", "D"),
    ("B", "C"),
    ("B", "D"),
    ("C", "D"),
)

INTRA_PAIRINGS_PER_GROUP = GROUP_SIZE
CROSS_PAIRINGS_PER_GROUP_PAIR = 2 * GROUP_SIZE
TOTAL_PAIRINGS = (
    GROUP_COUNT * INTRA_PAIRINGS_PER_GROUP
    + len(CROSS_GROUP_ORDER) * CROSS_PAIRINGS_PER_GROUP_PAIR
)

# --- Report format ---
GROUP_HEADER = "Bucket {label}:"
MATCHES_HEADER = "Matches:"
PAIRING_SEPARATOR = " - "

FORMAT_TEXT = "text"
FORMAT_JSON = "json"
OUTPUT_FORMATS = (FORMAT_TEXT, FORMAT_JSON)

# --- Defaults ---
DEFAULT_INPUT_PATH = "examples/teams.txt"
DEFAULT_OUTPUT_PATH = "examples/results.txt"
DEFAULT_OUTPUT_FORMAT = FORMAT_TEXT
FILE_ENCODING = "utf-8"
