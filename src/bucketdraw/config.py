"""DrawConfig data class and configuration file loading."""

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
from dataclasses import dataclass, fields
from pathlib import Path
from typing import Any, Dict, Optional, Union

from bucketdraw.constants import (
    DEFAULT_INPUT_PATH,
    DEFAULT_OUTPUT_FORMAT,
    DEFAULT_OUTPUT_PATH,
    FILE_ENCODING,
    OUTPUT_FORMATS,
)
from bucketdraw.exceptions import ConfigurationException
from bucketdraw.type_hints import OutputFormat
from bucketdraw.utils import setup_logger

logger = setup_logger(__name__)


@dataclass
class DrawConfig:
    """Settings for one draw run.

    Attributes
    ----------
    input_path : str
        Entrant list, one entrant per line.
    output_path : str
        Destination of the report.
    seed : int, optional
        Seed for the randomness source. ``None`` draws from OS entropy.
    output_format : str
        ``"text"`` or ``"json"``.
    strict : bool
        Reject duplicate entrants instead of only logging them.
    """

    input_path: str = DEFAULT_INPUT_PATH
    output_path: str = DEFAULT_OUTPUT_PATH
    seed: Optional[int] = None
    output_format: OutputFormat = DEFAULT_OUTPUT_FORMAT
    strict: bool = False

    def __post_init__(self) -> None:
        if self.output_format not in OUTPUT_FORMATS:
            raise ConfigurationException(
                f"unknown output format {self.output_format!r}, "
                f"expected one of {OUTPUT_FORMATS}"
            )
        if self.seed is not None and (
            isinstance(self.seed, bool) or not isinstance(self.seed, int)
        ):
            raise ConfigurationException(f"seed must be an integer, got {self.seed!r}")

    def to_dict(self) -> Dict[str, Any]:
        """Serialize configuration to dictionary."""
        return {
            "input_path": self.input_path,
            "output_path": self.output_path,
            "seed": self.seed,
            "output_format": self.output_format,
            "strict": self.strict,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "DrawConfig":
        """Deserialize configuration from dictionary, ignoring unknown keys."""
        known = {f.name for f in fields(cls)}
        unknown = set(data) - known
        if unknown:
            logger.warning(
                "Ignoring unknown config keys: %s", ", ".join(sorted(unknown))
            )
        return cls(**{key: value for key, value in data.items() if key in known})

    def merged(self, overrides: Dict[str, Any]) -> "DrawConfig":
        """Return a copy with every non-``None`` override applied."""
        data = self.to_dict()
        data.update(
            {key: value for key, value in overrides.items() if value is not None}
        )
        return DrawConfig.from_dict(data)


def load_configuration(config_file: Union[str, Path]) -> DrawConfig:
    """Load configuration from a JSON file.

    Args:
        config_file: Path to configuration file

    Returns:
        The configuration, defaults filled in for missing keys

    Raises:
        ConfigurationException: If the file is missing or not a JSON object
    """
    config_path = Path(config_file)
    try:
        with open(config_path, "r", encoding=FILE_ENCODING) as f:
            data = json.load(f)
    except OSError as e:
        raise ConfigurationException(
            f"cannot read configuration {config_path}: {e}"
        ) from e
    except json.JSONDecodeError as e:
        raise ConfigurationException(f"invalid JSON in {config_path}: {e}") from e

    if not isinstance(data, dict):
        raise ConfigurationException(
            f"configuration {config_path} must be a JSON object"
        )

    logger.info("Loaded configuration from: %s", config_path)
    return DrawConfig.from_dict(data)
