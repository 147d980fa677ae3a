#!/usr/bin/python3
"""Run all available unit tests."""
import os
import sys
import unittest
import unittest.runner


class MyTestRunner(unittest.runner.TextTestRunner):
    def __init__(self, *args, **kwargs):
        kwargs["stream"] = sys.stdout
        super().__init__(*args, **kwargs)


if __name__ == "__main__":
    sys.stdout.write("[tests] Running on %s\n" % sys.version.replace("\n", ""))
    dirname = os.path.dirname(__file__)
    if dirname:
        os.chdir(dirname)
    sys.path.insert(0, os.path.abspath("."))

    import testcommon

    if not testcommon.HAVE_APT_PKG:
        sys.stdout.write("[tests] python-apt not found, skipping the cache tests\n")

    for path in sorted(os.listdir(".")):
        if path.endswith(".py") and os.path.isfile(path) and path.startswith("test_"):
            exec("from %s import *" % path[:-3])

    unittest.main(testRunner=MyTestRunner)
