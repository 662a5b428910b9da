"""
Tokenizer behavioral tests.

Scope
- Validate inline-value splitting (first separator only, empty values).
- Validate short-cluster expansion and token classification.

Conventions
- Test method names follow CamelCase per project convention.
"""

from __future__ import annotations

import unittest
from unittest import TestCase

from orca.tokens import SEPARATOR, Token, expand, is_long, is_option, split


class TestSplit(TestCase):
    """Behavioral tests for split()."""

    def testSeparatorIsEquals(self):
        self.assertEqual(SEPARATOR, "=")

    def testLongWithValue(self):
        self.assertEqual(split("--file=foo.txt"), Token("--file", "foo.txt", True))

    def testWithoutSeparator(self):
        self.assertEqual(split("-f"), Token("-f", "", False))

    def testSeparatorWithoutValue(self):
        token = split("-f=")
        self.assertEqual(token.option, "-f")
        self.assertEqual(token.value, "")
        self.assertTrue(token.separator)

    def testSplitsOnFirstSeparatorOnly(self):
        self.assertEqual(split("--define=a=b="), Token("--define", "a=b=", True))

    def testQuotesAreLiteral(self):
        self.assertEqual(split('-h="test"'), Token("-h", '"test"', True))


class TestExpand(TestCase):
    """Behavioral tests for expand()."""

    def testSimpleCluster(self):
        self.assertEqual(expand("-la"), ["-l", "-a"])

    def testClusterEndingWithValue(self):
        self.assertEqual(expand("-laf=foo.txt"), ["-l", "-a", "-f=foo.txt"])

    def testSingleShortOption(self):
        self.assertEqual(expand("-f"), ["-f"])

    def testSingleShortOptionWithValue(self):
        self.assertEqual(expand("-u=root"), ["-u=root"])

    def testSeparatorWithoutValue(self):
        self.assertEqual(expand("-lf="), ["-l", "-f="])

    def testValueKeepsLaterSeparators(self):
        self.assertEqual(expand("-xa==b"), ["-x", "-a==b"])

    def testLeadingSeparatorIsItsOwnToken(self):
        self.assertEqual(expand("-=x"), ["-=", "-x"])


class TestClassification(TestCase):
    """Behavioral tests for is_option() and is_long()."""

    def testLoneDashIsNotAnOption(self):
        self.assertFalse(is_option("-"))

    def testEmptyTokenIsNotAnOption(self):
        self.assertFalse(is_option(""))

    def testPlainWordIsNotAnOption(self):
        self.assertFalse(is_option("file.txt"))

    def testShortAndLong(self):
        self.assertTrue(is_option("-f"))
        self.assertFalse(is_long("-f"))
        self.assertTrue(is_long("--file"))
        self.assertTrue(is_long("--"))


if __name__ == "__main__":
    unittest.main()
