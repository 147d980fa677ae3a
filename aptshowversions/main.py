# main.py - the apt-show-versions command
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
"""Command line entry point.

Options are parsed by apt_pkg into the APT configuration space, under
the APT::Show-Versions:: prefix, so they can just as well be set in
apt.conf or with -o.
"""

from __future__ import annotations

import logging
import sys
from collections.abc import Sequence
from typing import TextIO

import apt_pkg

from aptshowversions import __version__
from aptshowversions.cache import Cache
from aptshowversions.driver import (
    CONFIG_PREFIX,
    EXIT_ERROR,
    EXIT_OK,
    Options,
    check_usage,
    get_patterns,
    run,
)
from aptshowversions.errors import CacheUnavailableError, UsageError

__all__ = ["ARGUMENTS", "main", "show_help"]

# (short, long, configuration item[, type]) as understood by
# apt_pkg.parse_commandline()
ARGUMENTS = [
    ("u", "upgradeable", CONFIG_PREFIX + "Upgrades-Only"),
    ("b", "brief", CONFIG_PREFIX + "Brief"),
    ("c", "config-file", "", "ConfigFile"),
    ("o", "option", "", "ArbItem"),
    ("h", "help", CONFIG_PREFIX + "Help"),
    ("i", "initialize", CONFIG_PREFIX + "Dummy-Option"),
    ("v", "verbose", CONFIG_PREFIX + "Dummy-Option"),
    ("a", "allversions", CONFIG_PREFIX + "All-Versions"),
    ("R", "regex-all", CONFIG_PREFIX + "Regex-All"),
    ("n", "no-hold", CONFIG_PREFIX + "No-Hold"),
    ("p", "package", CONFIG_PREFIX + "Package", "HasArg"),
]

HELP = """\
Usage:
 apt-show-versions [options] [pattern ...]
 apt-show-versions shows available versions of installed packages

Options:
 -c=?                         configuration file
 -o=?                         option
 -u,--upgradeable             show only upgradeable packages
 -b,--brief                   show package names only
 -a,--allversions             show all versions of the packages
 -R,--regex-all               regular expressions apply to uninstalled packages
 -n,--no-hold                 do not show packages on hold
 -p,--package=NAME            same as giving NAME as the only pattern
 -h,--help                    show help
"""


def show_help(out: TextIO) -> None:
    out.write("apt-show-versions %s using APT %s\n\n" % (__version__, apt_pkg.VERSION))
    out.write(HELP)


def _setup_logging() -> None:
    if apt_pkg.config.find_b("Debug::Show-Versions", False):
        level = logging.DEBUG
    else:
        level = logging.WARNING
    logging.basicConfig(format="%(levelname)s: %(message)s", level=level)


def main(argv: Sequence[str] | None = None) -> int:
    """Run apt-show-versions with *argv* and return the exit status."""
    if argv is None:
        argv = sys.argv

    # init the package configuration, but do not re-initialize it
    if "APT" not in apt_pkg.config:
        apt_pkg.init_config()
    try:
        args = apt_pkg.parse_commandline(apt_pkg.config, ARGUMENTS, list(argv))
    except (apt_pkg.Error, SystemError) as e:
        sys.stderr.write("E: %s\n" % str(e).strip())
        return EXIT_ERROR

    _setup_logging()

    if apt_pkg.config.find_b(CONFIG_PREFIX + "Help", False):
        show_help(sys.stdout)
        return EXIT_OK

    apt_pkg.init_system()
    options = Options.from_config(apt_pkg.config)
    logging.debug("options: %r" % options)

    try:
        patterns = get_patterns(args, options)
        check_usage(patterns, options)
    except UsageError as e:
        sys.stderr.write("E: %s\n" % e)
        return EXIT_ERROR

    try:
        with Cache() as cache:
            return run(cache, patterns, options, sys.stdout, sys.stderr)
    except CacheUnavailableError as e:
        sys.stderr.write("E: %s\n" % e)
        # Scripts rely on the historic status 2 for a broken cache
        # when no package was named.
        return EXIT_ERROR if patterns else 2


if __name__ == "__main__":
    sys.exit(main())
