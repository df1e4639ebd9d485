"""Rendering and writing the draw report."""

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

import json
from pathlib import Path
from typing import List, Union

from bucketdraw.constants import (
    FILE_ENCODING,
    FORMAT_JSON,
    FORMAT_TEXT,
    MATCHES_HEADER,
    OUTPUT_FORMATS,
)
from bucketdraw.exceptions import ConfigurationException, DrawSinkException
from bucketdraw.models import Draw
from bucketdraw.type_hints import OutputFormat
from bucketdraw.utils import setup_logger

logger = setup_logger(__name__)


def render_text(draw: Draw) -> str:
    """Render the plain text report.

    Each group is written as a ``Bucket <label>:`` header, its members one per
    line and a blank separator line. The ``Matches:`` section follows with one
    ``<first> - <second>`` line per pairing.
    """
    lines: List[str] = []
    for group in draw.groups:
        lines.append(group.header)
        lines.extend(group.members)
        lines.append("")

    lines.append(MATCHES_HEADER)
    lines.extend(str(pairing) for pairing in draw.pairings)
    return "\n".join(lines) + "\n"


def render_json(draw: Draw) -> str:
    return json.dumps(draw.to_dict(), indent=2, ensure_ascii=False) + "\n"


def render(draw: Draw, output_format: OutputFormat = FORMAT_TEXT) -> str:
    if output_format == FORMAT_TEXT:
        return render_text(draw)
    if output_format == FORMAT_JSON:
        return render_json(draw)
    raise ConfigurationException(
        f"unknown output format {output_format!r}, expected one of {OUTPUT_FORMATS}"
    )


def write_report(
    draw: Draw, path: Union[str, Path], output_format: OutputFormat = FORMAT_TEXT
) -> Path:
    """Write the rendered draw to ``path``.

    The report is rendered before the file is opened, so a rendering error
    leaves the destination untouched.

    Raises:
        DrawSinkException: If the file cannot be written
    """
    content = render(draw, output_format)
    destination = Path(path)
    try:
        with open(destination, "w", encoding=FILE_ENCODING) as f:
            f.write(content)
    except OSError as e:
        raise DrawSinkException(f"cannot write report to {destination}: {e}") from e

    logger.info(
        "Wrote %s report with %s pairings to %s",
        output_format,
        len(draw.pairings),
        destination,
    )
    return destination
