#!/usr/bin/python3
import os
import re

from setuptools import setup


def get_version():
    """Get a PEP 0440 compatible version string"""
    version = os.environ.get("DEBVER")
    if not version:
        with open(os.path.join("aptshowversions", "__init__.py")) as init:
            match = re.search(r'^__version__ = "([^"]+)"', init.read(), re.M)
        version = match.group(1) if match else ""

    version = version.strip()

    if not version:
        return version

    version = version.replace("~alpha", ".a")
    version = version.replace("~beta", ".b")
    version = version.replace("~rc", ".rc")
    version = version.replace("~exp", ".dev")
    version = version.split("build")[0]

    return version


setup(
    name="apt-show-versions",
    description="Show how installed packages relate to the versions in the archive",
    version=get_version(),
    author="apt-show-versions developers",
    packages=["aptshowversions"],
    python_requires=">=3.9",
    # python-apt comes with the distribution (python3-apt); the copy on
    # the package index cannot be built, so it is only listed as an extra.
    extras_require={
        "apt": ["python-apt"],
    },
    entry_points={
        "console_scripts": [
            "apt-show-versions = aptshowversions.main:main",
        ],
    },
    license="GNU GPL",
    platforms="posix",
)
