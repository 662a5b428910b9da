r"""
Orca option descriptors and factories.

Overview
- Option: declarative descriptor for one recognized command-line option.
  • Kind.SIMPLE: presence-only switch (e.g., -h/--help); never carries a value.
  • Kind.COMPOUND: value-bearing option (e.g., -f/--file); may be given several
    times, every occurrence appending one value.
- Factories
  • flag(...): build a simple option.
  • option(...): build a compound option, with one default or a sequence of them.

Introspection & representation
- OptionType metaclass provides stable __repr__/__rich_repr__ and exposes the
  fields declared in __introspectable__ via read-only properties.

Metadata (sanitized on construction)
- aliases: one or more names, each either a short form "-x" (exactly one
  character after the dash, so it can take part in clusters such as "-laf") or
  a long form "--name". Whitespace and the separator '=' are rejected, as are
  duplicates inside one option.
- name: label used in the usage line for compound options ("[-f[=]file]").
- descr: description shown in the options block of the help page.
- defaults: fallback values, consulted by index when fewer values were supplied.
  Simple options accept defaults but never use them.

Runtime state (written by the parser only)
- values: supplied values, in command-line order.
- provided: whether the option appeared on the command line at all.

Quick example:
    >>> from orca.options import flag, option
    >>> help = flag("-h", "--help", name="help", descr="print this help page")
    >>> file = option("-f", "--file", name="file", descr="input file", default="-")
    >>> file.value_at()
    '-'
"""
import copy
import functools
import operator
import re
from enum import Enum

from .utils import *


class Kind(Enum):
    SIMPLE = "simple"
    COMPOUND = "compound"


class OptionType(type):
    """
    Metaclass that turns option classes into introspectable descriptors.

    Responsibilities
    - Expose the names listed in __introspectable__ as read-only properties
      backed by "_" + name (sequences are served as tuples).
    - Provide stable, readable __repr__/__rich_repr__ implementations.

    Conventions
    - __typename__ is derived from the class name (camel-case split with hyphens)
      and used in validation messages.
    """
    __introspectable__ = ()

    def __new__(cls, name, bases, namespace, **options):
        self = super().__new__(
            cls,
            name,
            bases,
            namespace | {
                "__typename__": re.sub(r"(?<!^)(?=[A-Z])", r"-", name).lower(),
            } | {
                field: view(field) for field in namespace.get("__introspectable__", ())
            },
        )

        @rename("__repr__")
        def __repr__(self):
            """
            Return a concise, stable representation with key metadata.

            Example
            - option(aliases=('-v', '--verbose'), kind=<Kind.SIMPLE: 'simple'>, ...)
            """
            fields = map(functools.partial(operator.mod, "%s=%r"), self.__rich_repr__())
            return "%s(%s)" % (type(self).__typename__, ", ".join(fields))
        self.__repr__ = __repr__

        @rename("__rich_repr__")
        def __rich_repr__(self):
            """
            Yield (name, object) pairs for pretty printers (e.g., rich.pretty).
            """
            for field in type(self).__introspectable__:
                yield field, getattr(self, field)
        self.__rich_repr__ = __rich_repr__

        return self


def _sanitize_aliases(cls, aliases, /):
    r"""
    Internal: validate option aliases and return them as a tuple (order kept).

    Accepted forms
    - short: r"-[^\s=-]"     e.g. "-h", "-f"
    - long:  r"--[^\s=]+"    e.g. "--help", "--dry-run"

    Raises
    - TypeError: when no alias is given or an alias is not a string.
    - ValueError: when an alias has a bad form or is repeated.
    """
    if not aliases:
        raise TypeError(f"{cls.__typename__} must specify at least one alias")

    sanitized = []
    for alias in aliases:
        if not isinstance(alias, str):
            raise TypeError(f"{cls.__typename__} aliases must be strings")
        elif not re.fullmatch(r"-[^\s=-]|--[^\s=]+", alias):
            raise ValueError(f"{cls.__typename__} alias {alias!r} must look like '-x' or '--name'")
        elif alias in sanitized:
            raise ValueError(f"{cls.__typename__} aliases cannot contain duplicates")
        sanitized.append(alias)
    return tuple(sanitized)


def _sanitize_text(cls, field, value, /):
    """
    Internal: normalize the free-form help metadata ('name' and 'descr').
    Unset becomes an empty string; provided values are kept verbatim.
    """
    if not isinstance(value, str | UnsetType):
        raise TypeError(f"{cls.__typename__} {field!r} must be a string")
    return nullify(value, "")


class Option(metaclass=OptionType):
    """
    Named command-line option (simple or compound).

    Aliases are narrower than arbitrary strings: each one must be "-x" or
    "--name", the only spellings a command-line token can ever resolve to.
    Anything else ("-", "+v", "help", "-long") is rejected with ValueError at
    declaration time instead of silently never matching.

    Properties
    - The names listed in __introspectable__ are exposed as read-only attributes;
      `values` and `provided` only change while a Parser processes the
      command line.
    """

    __introspectable__ = (
        "aliases",
        "kind",
        "name",
        "descr",
        "defaults",
        "values",
        "provided",
    )

    def __init__(self, *aliases, kind=Kind.SIMPLE, name=Unset, descr=Unset, defaults=Unset):
        """
        Construct an Option with the provided metadata.

        Parameters
        - aliases: one or more str ("-f", "--file").
        - kind: Kind.SIMPLE (default) or Kind.COMPOUND.
        - name: label for the value in the usage line.
        - descr: short description for the help page.
        - defaults: one string or an iterable of strings.
        """
        cls = type(self)
        if not isinstance(kind, Kind):
            raise TypeError(f"{cls.__typename__} 'kind' must be a Kind")

        self._aliases = _sanitize_aliases(cls, aliases)
        self._kind = kind
        self._name = _sanitize_text(cls, "name", name)
        self._descr = _sanitize_text(cls, "descr", descr)
        self._defaults = sequence(defaults, f"{cls.__typename__} defaults")
        self._values = []
        self._provided = False

    def has_alias(self, alias, /):
        return alias in self._aliases

    def is_compound(self):
        return self._kind is Kind.COMPOUND

    def value_at(self, index=0, /):
        """
        Return the value at `index`: the supplied one first, then the default,
        then an empty string. Simple options always answer an empty string.

        Example: with "./prog -f bar.txt -f test.txt", value_at() is 'bar.txt'
        and value_at(1) is 'test.txt'.
        """
        if not self.is_compound() or index < 0:
            return ""
        if index < len(self._values):
            return self._values[index]
        if index < len(self._defaults):
            return self._defaults[index]
        return ""

    def joined_aliases(self, separator=", ", /):
        return separator.join(self._aliases)

    def _provide(self):
        self._provided = True

    def _supply(self, value, /):
        assert self.is_compound(), "simple options cannot hold values"
        self._values.append(value)

    def __copy__(self):
        clone = type(self)(
            *self._aliases,
            kind=self._kind,
            name=self._name,
            descr=self._descr,
            defaults=self._defaults,
        )
        clone._values = copy.copy(self._values)
        clone._provided = self._provided
        return clone


def flag(*aliases, name=Unset, descr=Unset):
    """
    Factory for a simple (presence-only) option.

        >>> flag("-h", "--help", name="help", descr="print help page")
    """
    return Option(*aliases, kind=Kind.SIMPLE, name=name, descr=descr)


def option(*aliases, name=Unset, descr=Unset, default=Unset):
    """
    Factory for a compound (value-bearing) option.

    `default` may be a single string or an iterable of strings:
        >>> option("-p", "--prefix", name="prefix", default="Orca says: ")
        >>> option("-d", "--default", default=("1", "2", "3"))
    """
    return Option(*aliases, kind=Kind.COMPOUND, name=name, descr=descr, defaults=default)


__all__ = (
    "Kind",
    "Option",
    "flag",
    "option",
)

del OptionType
