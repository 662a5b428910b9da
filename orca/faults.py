"""
Orca faults (parse and query errors) and rendering.

Scope
- FaultCode: canonical, stable numeric identifiers for every outcome a parser
  can record. The values are part of the public contract (hosts print them as
  exit diagnostics), so they never change meaning.
- ParseFault: base type that carries message + options and knows how to render
  itself as a single, prefixed diagnostic line.
- trigger(): central entry point to surface a fault (respecting verbose/prefix/colorful).

Contract
- Faults are recorded, never raised by the parser. They subclass Exception so
  that a host can opt into raising them (see Parser.raise_for_error()).
- Diagnostics are fire-and-forget side output on stderr; they are not the
  channel of record (Parser.last_error() is).
- Styles can be overridden by a __styles__ mapping in __main__.
"""
from collections import defaultdict
from enum import IntEnum
from types import MappingProxyType

from rich.console import Console
from rich.text import Text

console = Console(stderr=True)


class FaultCode(IntEnum):
    """
    canonical outcome codes of a parse pass or a query (stable identifiers).

    - NO_ERROR: default state, also restored by every successful query.
    - MISSING_VALUE: a compound option was left waiting for a value (another
      option interrupted it, the input ended, or nothing followed the separator).
    - OPTION_CANT_HOLD_VALUE: a simple option was given an inline value.
    - NOT_POSSIBLE_OPTION: a command-line token named an unknown alias.
    - OPTION_DOESNT_EXIST: a query named an unknown alias.
    - TOO_MUCH_ARGUMENTS: more positional arguments than the configured limit.
    """
    NO_ERROR               = 0
    MISSING_VALUE          = 1
    OPTION_CANT_HOLD_VALUE = 2
    NOT_POSSIBLE_OPTION    = 3
    OPTION_DOESNT_EXIST    = 4
    TOO_MUCH_ARGUMENTS     = 5


class ParseFault(Exception):
    code = FaultCode.NO_ERROR

    def __init__(self, message, /, **options):
        assert isinstance(message, str)
        super().__init__(message)
        self.message = message
        self.options = MappingProxyType(options)

    def __rich__(self):
        styles = defaultdict(str, {
            "error-prefix": "bold #FF4DA6",  # friendly pinky prefix
            "error-message": "#C8C8D0",  # soft light gray message
        } | getattr(__import__("__main__"), "__styles__", {}))

        colorful = self.options.get("colorful", False)

        def text(fragment, style):
            if not fragment:
                return Text("")
            return Text(fragment, styles[style] if colorful else "")

        return Text.assemble(
            text(self.options.get("error_prefix", ""), "error-prefix"),
            text(self.message, "error-message"),
        )

    def __str__(self):
        return self.options.get("error_prefix", "") + self.message

    def __trigger__(self):
        if not self.options.get("verbose", True):
            return
        console.print(self, soft_wrap=True)

    def __replace__(self, *unused, **overrides):
        assert not unused, "positional arguments are not allowed"
        return type(self)(self.message, **{**self.options, **overrides})


class MissingValueError(ParseFault):
    code = FaultCode.MISSING_VALUE


class OptionCantHoldValueError(ParseFault):
    code = FaultCode.OPTION_CANT_HOLD_VALUE


class NotPossibleOptionError(ParseFault):
    code = FaultCode.NOT_POSSIBLE_OPTION


class OptionDoesntExistError(ParseFault):
    code = FaultCode.OPTION_DOESNT_EXIST


class TooMuchArgumentsError(ParseFault):
    code = FaultCode.TOO_MUCH_ARGUMENTS


def trigger(fault, /, **options):
    """
    surface a fault with the given runtime options and return the configured copy.

    contract
    - fault must provide __trigger__ and __replace__ methods (see ParseFault).
    - options are merged into a copy of the fault via __replace__(**options) before
      triggering; the merged copy is what callers should record.
    - triggering only prints (when verbose); it never raises.

    typical options
    - error_prefix, verbose, colorful, plus any context the reporter may want
      to keep (token, option, count, limit, ...).
    """
    if (
        not hasattr(fault, "__trigger__") or
        not callable(fault.__trigger__) or
        not hasattr(fault, "__replace__") or
        not callable(fault.__replace__)
    ):
        raise TypeError("trigger() argument must have a __trigger__ and __replace__ methods")
    fault = fault.__replace__(**options)
    fault.__trigger__()
    return fault


__all__ = (
    "FaultCode",
    "ParseFault",
    "MissingValueError",
    "OptionCantHoldValueError",
    "NotPossibleOptionError",
    "OptionDoesntExistError",
    "TooMuchArgumentsError",
    "trigger",
)
