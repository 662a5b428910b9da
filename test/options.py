"""
Options module behavioral tests.

Scope
- Validate Option construction: alias forms, duplicates, kinds, help metadata.
- Validate the flag()/option() factories and default normalization.
- Validate value_at() fallbacks and the read-only views.

Conventions
- Test method names follow CamelCase per project convention.
"""

from __future__ import annotations

import copy
import unittest
from unittest import TestCase

from orca import Kind, Option, flag, option


class TestOptionConstruction(TestCase):
    """Behavioral tests for Option declarations."""

    def testOptionRequiresAtLeastOneAlias(self):
        with self.assertRaises(TypeError):
            Option()

    def testOptionAliasMustBeString(self):
        with self.assertRaises(TypeError):
            Option("-h", 1)

    def testOptionAliasesKeepDeclarationOrder(self):
        o = flag("-h", "--help")
        self.assertEqual(o.aliases, ("-h", "--help"))

    def testOptionDuplicateAliasesRejected(self):
        with self.assertRaises(ValueError):
            flag("-h", "-h")

    def testOptionAliasWithoutDashRejected(self):
        with self.assertRaises(ValueError):
            flag("help")

    def testOptionLongSingleDashAliasRejected(self):
        # "-ab" is always read as the cluster "-a -b" and could never match.
        with self.assertRaises(ValueError):
            flag("-ab")

    def testOptionLoneDashAndPlusAliasesRejected(self):
        for alias in ("-", "+v"):
            with self.assertRaises(ValueError):
                flag(alias)

    def testOptionAliasWithSeparatorRejected(self):
        with self.assertRaises(ValueError):
            option("--file=x")

    def testOptionBareDoubleDashRejected(self):
        with self.assertRaises(ValueError):
            flag("--")

    def testOptionKindMustBeKind(self):
        with self.assertRaises(TypeError):
            Option("-f", kind="compound")

    def testOptionDefaultKindIsSimple(self):
        self.assertIs(Option("-v").kind, Kind.SIMPLE)

    def testOptionNameAndDescrDefaultToEmpty(self):
        o = flag("-v")
        self.assertEqual(o.name, "")
        self.assertEqual(o.descr, "")

    def testOptionHelpTextIsKeptVerbatim(self):
        o = option("-f", name=" file ", descr="  talk more  ")
        self.assertEqual(o.name, " file ")
        self.assertEqual(o.descr, "  talk more  ")

    def testOptionDescrMustBeString(self):
        with self.assertRaises(TypeError):
            flag("-v", descr=3)

    def testOptionFreshStateIsEmpty(self):
        o = option("-f")
        self.assertEqual(o.values, ())
        self.assertFalse(o.provided)


class TestOptionFactories(TestCase):
    """Behavioral tests for flag() and option()."""

    def testFlagBuildsSimpleOption(self):
        o = flag("-h", "--help", name="help", descr="print help page")
        self.assertIs(o.kind, Kind.SIMPLE)
        self.assertFalse(o.is_compound())

    def testOptionBuildsCompoundOption(self):
        o = option("-f", "--file", name="file")
        self.assertIs(o.kind, Kind.COMPOUND)
        self.assertTrue(o.is_compound())

    def testOptionSingleDefault(self):
        o = option("-p", default="Orca says: ")
        self.assertEqual(o.defaults, ("Orca says: ",))

    def testOptionDefaultSequence(self):
        o = option("-d", default=["1", "2", "default_option3"])
        self.assertEqual(o.defaults, ("1", "2", "default_option3"))

    def testOptionDefaultsMustBeStrings(self):
        with self.assertRaises(TypeError):
            option("-d", default=[1, 2])

    def testOptionDefaultsMustBeIterable(self):
        with self.assertRaises(TypeError):
            option("-d", default=5)


class TestOptionQueries(TestCase):
    """Behavioral tests for has_alias(), value_at() and joined_aliases()."""

    def testHasAliasMatchesEveryAlias(self):
        o = option("-f", "--file")
        self.assertTrue(o.has_alias("-f"))
        self.assertTrue(o.has_alias("--file"))

    def testHasAliasIsExactAndCaseSensitive(self):
        o = option("-f", "--file")
        self.assertFalse(o.has_alias("-F"))
        self.assertFalse(o.has_alias("--fil"))
        self.assertFalse(o.has_alias("--file="))

    def testAliasesAreExclusiveAcrossOptions(self):
        options = [flag("-h", "--help"), option("-f", "--file"), flag("-l")]
        for declared in options:
            for alias in declared.aliases:
                owners = [o for o in options if o.has_alias(alias)]
                self.assertEqual(owners, [declared])

    def testValueAtFallsBackToDefaults(self):
        o = option("-d", default=("1", "2", "3"))
        self.assertEqual(o.value_at(), "1")
        self.assertEqual(o.value_at(2), "3")

    def testValueAtSuppliedBeatsDefault(self):
        o = option("-d", default=("1", "2", "3"))
        o._supply("first")
        self.assertEqual(o.value_at(0), "first")
        self.assertEqual(o.value_at(1), "2")

    def testValueAtOutOfRangeIsEmpty(self):
        o = option("-d", default="1")
        self.assertEqual(o.value_at(5), "")
        self.assertEqual(o.value_at(-1), "")

    def testValueAtSimpleOptionIsAlwaysEmpty(self):
        o = Option("-v", defaults="ignored")
        self.assertEqual(o.value_at(), "")

    def testSimpleOptionCannotHoldValues(self):
        with self.assertRaises(AssertionError):
            flag("-v")._supply("x")

    def testJoinedAliasesDefaultSeparator(self):
        self.assertEqual(flag("-h", "--help").joined_aliases(), "-h, --help")

    def testJoinedAliasesCustomSeparator(self):
        self.assertEqual(flag("-h", "--help").joined_aliases(" | "), "-h | --help")


class TestOptionIntrospection(TestCase):
    """Behavioral tests for read-only views, repr and copies."""

    def testValuesViewIsReadOnly(self):
        o = option("-f")
        o._supply("a.txt")
        self.assertIsInstance(o.values, tuple)
        with self.assertRaises(AttributeError):
            o.values = ("b.txt",)

    def testReprListsFields(self):
        text = repr(flag("-h", "--help", name="help"))
        self.assertTrue(text.startswith("option("))
        self.assertIn("aliases=('-h', '--help')", text)
        self.assertIn("name='help'", text)
        self.assertIn("provided=False", text)

    def testRichReprFieldOrder(self):
        fields = [name for name, _ in option("-f").__rich_repr__()]
        self.assertEqual(fields, ["aliases", "kind", "name", "descr", "defaults", "values", "provided"])

    def testCopyIsIndependent(self):
        o = option("-f", "--file", name="file", descr="d", default="x")
        o._supply("a")
        clone = copy.copy(o)
        clone._supply("b")
        clone._provide()
        self.assertEqual(o.values, ("a",))
        self.assertFalse(o.provided)
        self.assertEqual(clone.values, ("a", "b"))
        self.assertEqual(clone.aliases, o.aliases)
        self.assertEqual(clone.defaults, ("x",))


if __name__ == "__main__":
    unittest.main()
