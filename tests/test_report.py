#!/usr/bin/python3
"""Unit tests for the reporter and the table printer."""

import io
import unittest

import testcommon
from fakecache import debian_cache

from aptshowversions.classifier import UpgradeState
from aptshowversions.driver import Options
from aptshowversions.package import SELSTATE_HOLD
from aptshowversions.report import Reporter, TablePrinter


class TestTablePrinter(unittest.TestCase):
    def test_alignment(self):
        table = TablePrinter(3)
        table.insert(("a", "bbb", "c"))
        table.insert(("aaaa", "b", "cccccc"))
        out = io.StringIO()
        table.output(out)
        self.assertEqual(out.getvalue(), "a    bbb c\naaaa b   cccccc\n")

    def test_text_lines(self):
        table = TablePrinter(2)
        table.insert(("x", "y"))
        table.insert_text("a long line of text that is not a row")
        table.insert(("xx", "y"))
        self.assertEqual(
            list(table.format()),
            ["x  y", "a long line of text that is not a row", "xx y"],
        )

    def test_wrong_column_count(self):
        table = TablePrinter(4)
        self.assertRaises(ValueError, table.insert, ("a", "b"))

    def test_empty(self):
        out = io.StringIO()
        TablePrinter(4).output(out)
        self.assertEqual(out.getvalue(), "")


class ReporterTestCase(testcommon.TestCase):
    def setUp(self):
        testcommon.TestCase.setUp(self)
        self.cache = debian_cache()
        c = self.cache
        self.foo = c.add_package("foo", [("1.0", [c.stable])], installed="1.0")
        self.bar = c.add_package(
            "bar", [("1.1", [c.stable]), ("1.0", [c.stable])], installed="1.0"
        )
        self.baz = c.add_package("baz", [("2.0", [])], installed="2.0")
        self.qux = c.add_package(
            "qux", [("2.0", [c.experimental]), ("1.0", [])], installed="1.0"
        )
        self.old = c.add_package(
            "old", [("3.0", []), ("2.0", [c.stable])], installed="3.0"
        )
        self.new = c.add_package("new", [("1.0", [c.testing])])

    def reporter(self, **kwargs):
        self.out = io.StringIO()
        c = self.cache
        return Reporter(c, c.policy, c.source_entries, Options(**kwargs), self.out)


class TestVerdict(ReporterTestCase):
    def line(self, pkg, **kwargs):
        reporter = self.reporter(**kwargs)
        reporter.show(pkg, show_uninstalled=True)
        return self.out.getvalue()

    def test_up_to_date(self):
        self.assertEqual(self.line(self.foo), "foo:amd64/stable uptodate 1.0\n")

    def test_upgradable(self):
        self.assertEqual(
            self.line(self.bar), "bar:amd64/stable upgradable from 1.0 to 1.1\n"
        )

    def test_not_available(self):
        self.assertEqual(
            self.line(self.baz),
            "baz:amd64 2.0 installed: No available version in archive\n",
        )

    def test_manual(self):
        self.assertEqual(
            self.line(self.qux),
            "qux:amd64/experimental *manually* upgradable from 1.0 to 2.0\n",
        )

    def test_downgrade(self):
        self.assertEqual(
            self.line(self.old), "old:amd64/stable 3.0 newer than version in archive\n"
        )

    def test_not_installed(self):
        self.assertEqual(self.line(self.new), "new:amd64 not installed\n")

    def test_brief(self):
        for pkg in (self.foo, self.bar, self.baz, self.qux, self.old, self.new):
            line = self.line(pkg, brief=True)
            self.assertTrue(line.endswith("\n"))
            self.assertFalse(any(ch.isspace() for ch in line[:-1]), line)
        self.assertEqual(self.line(self.bar, brief=True), "bar:amd64/stable\n")
        self.assertEqual(self.line(self.baz, brief=True), "baz:amd64\n")


class TestReport(ReporterTestCase):
    def test_skip_uninstalled(self):
        reporter = self.reporter()
        self.assertIsNone(reporter.show(self.new))
        self.assertEqual(self.out.getvalue(), "")

    def test_all_installed_in_order(self):
        reporter = self.reporter()
        states = reporter.report(self.cache.packages)
        self.assertEqual(
            self.out.getvalue(),
            "bar:amd64/stable upgradable from 1.0 to 1.1\n"
            "baz:amd64 2.0 installed: No available version in archive\n"
            "foo:amd64/stable uptodate 1.0\n"
            "old:amd64/stable 3.0 newer than version in archive\n"
            "qux:amd64/experimental *manually* upgradable from 1.0 to 2.0\n",
        )
        self.assertEqual(
            [state for _, state in states],
            [
                UpgradeState.AUTOMATIC_UPGRADE,
                UpgradeState.NOT_AVAILABLE,
                UpgradeState.UP_TO_DATE,
                UpgradeState.DOWNGRADE_ONLY,
                UpgradeState.MANUAL_UPGRADE,
            ],
        )

    def test_upgrades_only(self):
        reporter = self.reporter()
        reporter.report(self.cache.packages)
        everything = self.out.getvalue().splitlines()

        reporter = self.reporter(upgrades_only=True)
        states = reporter.report(self.cache.packages)
        upgrades = self.out.getvalue().splitlines()
        self.assertEqual(
            upgrades,
            [
                "bar:amd64/stable upgradable from 1.0 to 1.1",
                "qux:amd64/experimental *manually* upgradable from 1.0 to 2.0",
            ],
        )
        self.assertTrue(set(upgrades) <= set(everything))
        # Suppressed packages are still classified
        self.assertEqual(len(states), 5)

    def test_upgrades_only_not_available(self):
        reporter = self.reporter(upgrades_only=True)
        self.assertEqual(reporter.show(self.baz), UpgradeState.NOT_AVAILABLE)
        self.assertEqual(self.out.getvalue(), "")

    def test_no_hold(self):
        c = self.cache
        held = c.add_package(
            "held",
            [("2.0", [c.stable]), ("1.0", [c.stable])],
            installed="1.0",
            selected_state=SELSTATE_HOLD,
        )
        reporter = self.reporter(no_hold=True)
        self.assertIsNone(reporter.show(held))
        self.assertEqual(self.out.getvalue(), "")

        reporter = self.reporter()
        self.assertEqual(reporter.show(held), UpgradeState.AUTOMATIC_UPGRADE)
        self.assertEqual(
            self.out.getvalue(), "held:amd64/stable upgradable from 1.0 to 2.0\n"
        )


class TestAllVersions(ReporterTestCase):
    def test_upgradable(self):
        reporter = self.reporter(all_versions=True)
        reporter.show(self.bar)
        self.assertEqual(
            self.out.getvalue(),
            "bar:amd64 1.0 install ok installed\n"
            "bar:amd64 1.1 stable deb.debian.org\n"
            "bar:amd64 1.0 stable deb.debian.org\n"
            "No testing version\n"
            "No experimental version\n"
            "bar:amd64/stable upgradable from 1.0 to 1.1\n",
        )

    def test_not_installed(self):
        reporter = self.reporter(all_versions=True)
        reporter.show(self.new, show_uninstalled=True)
        self.assertEqual(
            self.out.getvalue(),
            "Not installed\n"
            "No stable version\n"
            "new:amd64 1.0 testing deb.debian.org\n"
            "No experimental version\n"
            "new:amd64 not installed\n",
        )

    def test_grouping_and_widths(self):
        c = self.cache
        local = c.add_file("local-archive", "", site="repo.example.org")
        unstable = c.add_file("unstable", "sid", site="ftp.de.debian.org")
        pkg = c.add_package(
            "zap",
            [
                ("10.0-1", [unstable]),
                ("2.0", [local, c.experimental]),
                ("1.0", [c.stable]),
            ],
            installed="1.0",
        )
        reporter = self.reporter(all_versions=True)
        reporter.show_all_versions(pkg)
        self.assertEqual(
            self.out.getvalue().splitlines(),
            [
                "zap:amd64 1.0 install ok installed",
                "zap:amd64 2.0    local-archive repo.example.org",
                "zap:amd64 1.0    stable        deb.debian.org",
                "No testing version",
                "zap:amd64 10.0-1 unstable      ftp.de.debian.org",
                "zap:amd64 2.0    experimental  deb.debian.org",
            ],
        )

    def test_heading_states(self):
        c = self.cache
        pkg = c.add_package(
            "hold",
            [("1.0", [c.stable])],
            installed="1.0",
            selected_state=SELSTATE_HOLD,
            inst_state=1,
        )
        reporter = self.reporter(all_versions=True)
        reporter.show_all_versions(pkg)
        self.assertEqual(
            self.out.getvalue().splitlines()[0],
            "hold:amd64 1.0 hold reinstreq installed",
        )

    def test_brief_keeps_block(self):
        reporter = self.reporter(all_versions=True, brief=True)
        reporter.show(self.foo)
        lines = self.out.getvalue().splitlines()
        self.assertEqual(lines[0], "foo:amd64 1.0 install ok installed")
        self.assertEqual(lines[-1], "foo:amd64/stable")

    def test_upgrades_only_suppresses_block(self):
        reporter = self.reporter(all_versions=True, upgrades_only=True)
        reporter.show(self.foo)
        self.assertEqual(self.out.getvalue(), "")


if __name__ == "__main__":
    unittest.main()
