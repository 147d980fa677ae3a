# errors.py - exceptions raised by apt-show-versions
#
#  Copyright (c) 2013-2026 The apt-show-versions developers
#
#  This program is free software; you can redistribute it and/or
#  modify it under the terms of the GNU General Public License as
#  published by the Free Software Foundation; either version 2 of the
#  License, or (at your option) any later version.
#
#  This program is distributed in the hope that it will be useful,
#  but WITHOUT ANY WARRANTY; without even the implied warranty of
#  MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
#  GNU General Public License for more details.
#
#  You should have received a copy of the GNU General Public License
#  along with this program; if not, write to the Free Software
#  Foundation, Inc., 59 Temple Place, Suite 330, Boston, MA 02111-1307
#  USA
"""Exceptions used throughout apt-show-versions."""

from __future__ import annotations

__all__ = [
    "ShowVersionsError",
    "UsageError",
    "CacheUnavailableError",
    "PatternError",
    "CacheInvariantError",
]


class ShowVersionsError(Exception):
    """Base class for all expected apt-show-versions failures."""


class UsageError(ShowVersionsError):
    """Exception that is thrown for conflicting command line options."""


class CacheUnavailableError(ShowVersionsError, IOError):
    """Exception that is thrown when the package cache cannot be opened."""


class PatternError(ShowVersionsError, LookupError):
    """Exception that is thrown when a pattern matches no package.

    The offending pattern is available as the *pattern* attribute.
    """

    def __init__(self, pattern: str, message: str | None = None) -> None:
        if message is None:
            message = "Unable to locate package %s" % pattern
        super().__init__(message)
        self.pattern = pattern


class CacheInvariantError(AssertionError):
    """The cache contains data that cannot happen.

    This signals a programming error or a corrupt cache. It does not
    derive from ShowVersionsError and the command line driver lets it
    propagate.
    """
