"""Exceptions for use in Bucket Draw"""

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


# ========== Base Application Exception ==========


class BucketDrawException(Exception):
    """Base exception for all Bucket Draw errors.

    All custom exceptions in the application should inherit from this class.
    This enables catching all application-specific errors with a single except clause.
    """

    pass


# ========== Validation Exceptions ==========


class ValidationException(BucketDrawException):
    """Base exception for invalid draw input."""

    pass


class EntrantCountException(ValidationException):
    """Raised when the entrant pool does not hold the expected number of entrants."""

    def __init__(self, observed: int, expected: int):
        self.observed = observed
        self.expected = expected
        super().__init__(f"expected {expected} entrants, got {observed}")


class InvalidGroupException(ValidationException):
    """Raised when a group has the wrong size or an unknown label."""

    pass


class SelfPairingException(ValidationException):
    """Raised when an entrant would be paired with itself."""

    pass


class DuplicateEntrantException(ValidationException):
    """Raised in strict mode when the entrant pool repeats an identifier."""

    def __init__(self, duplicates):
        self.duplicates = sorted(duplicates)
        super().__init__(f"duplicate entrants: {', '.join(self.duplicates)}")


# ========== Lookup Exceptions ==========


class EntrantNotFoundException(BucketDrawException):
    """Raised when a requested entrant is not part of the draw."""

    pass


# ========== I/O Exceptions ==========


class EntrantSourceException(BucketDrawException):
    """Raised when the entrant list cannot be read."""

    pass


class DrawSinkException(BucketDrawException):
    """Raised when the draw report cannot be written."""

    pass


# ========== Configuration Exceptions ==========


class ConfigurationException(BucketDrawException):
    """Raised when a configuration file is missing or malformed."""

    pass
