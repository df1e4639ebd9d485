"""Reading the entrant list."""

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

from pathlib import Path
from typing import Iterable, List, Union

from bucketdraw.constants import FILE_ENCODING
from bucketdraw.draw.assigner import validate_pool_size
from bucketdraw.exceptions import EntrantSourceException
from bucketdraw.type_hints import Entrant
from bucketdraw.utils import setup_logger

logger = setup_logger(__name__)


def parse_entrants(lines: Iterable[str]) -> List[Entrant]:
    """Return one entrant per non-blank line, surrounding whitespace removed."""
    entrants = []
    for line in lines:
        # Names are trimmed as well, so "  Inter  " and "Inter" are one entrant
        name = line.strip()
        if name:
            entrants.append(name)
    return entrants


def read_entrants(path: Union[str, Path]) -> List[Entrant]:
    """Load and validate the entrant pool from a text file.

    Args:
        path: File with one entrant per line; blank lines are skipped

    Returns:
        Entrants in file order

    Raises:
        EntrantSourceException: If the file cannot be opened or decoded
        EntrantCountException: If the file does not name exactly 36 entrants
    """
    source = Path(path)
    try:
        with open(source, "r", encoding=FILE_ENCODING) as f:
            entrants = parse_entrants(f)
    except (OSError, UnicodeDecodeError) as e:
        raise EntrantSourceException(f"cannot read entrants from {source}: {e}") from e

    validate_pool_size(entrants)
    logger.info("Loaded %s entrants from %s", len(entrants), source)
    return entrants
