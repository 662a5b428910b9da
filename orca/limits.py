"""
Positional limit sentinel.

This module defines a process-wide singleton `unlimited` and its type
`unlimitedtype`. It is the default `positional_limit` of a parser
configuration and means "accept any amount of positional arguments".

Semantics
- Identity: unlimitedtype() always returns the same instance per interpreter,
  and copy/deepcopy/pickle round-trips preserve it.
- Ordering: the sentinel compares greater than every integer, so a check such
  as `len(arguments) > limit` never fires for it and the parser does not need
  to special-case it.
- Stable string form: repr(unlimited) == "unlimited" (Rich uses a dim style).

Example
    >>> from orca import Config, unlimited
    >>> Config(positional_limit=unlimited)
"""
import functools
import numbers

from rich.text import Text


class unlimitedtype:
    """
    Singleton type for an unbounded positional limit.

    Notes
    - This type is final; subclassing is blocked to preserve semantics.
    - Only integers are ordered against the sentinel; comparing it with any
      other object returns NotImplemented (and therefore raises TypeError).
    """

    @functools.cache
    def __new__(cls):
        return super().__new__(cls)

    def __lt__(self, other):
        if isinstance(other, numbers.Integral):
            return False
        return NotImplemented

    def __le__(self, other):
        if isinstance(other, numbers.Integral):
            return False
        return NotImplemented

    def __gt__(self, other):
        if isinstance(other, numbers.Integral):
            return True
        return NotImplemented

    def __ge__(self, other):
        if isinstance(other, numbers.Integral):
            return True
        return NotImplemented

    def __rich__(self):
        """
        Rich protocol hook: render a dim 'unlimited' token.
        """
        return Text(repr(self), style="dim")

    def __repr__(self):
        return "unlimited"

    def __init_subclass__(cls, **options):
        raise TypeError("type 'unlimitedtype' is not an acceptable base type")


unlimited = unlimitedtype()


__all__ = (
    "unlimitedtype",
    "unlimited",
)
