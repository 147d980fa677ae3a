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
"""Show how installed packages relate to the versions in the archive.

The apt_pkg based cache lives in :mod:`aptshowversions.cache` and is not
imported here, so the classification and reporting code can be used
with any object providing the same interface.
"""

__version__ = "0.30"

from aptshowversions.classifier import UpgradeState as UpgradeState
from aptshowversions.classifier import classify as classify
from aptshowversions.package import Package as Package
from aptshowversions.package import PackageFile as PackageFile
from aptshowversions.package import SourceEntry as SourceEntry
from aptshowversions.package import Version as Version
from aptshowversions.suites import SuiteAttributor as SuiteAttributor

__all__ = [
    "Package",
    "PackageFile",
    "SourceEntry",
    "SuiteAttributor",
    "UpgradeState",
    "Version",
    "classify",
]
