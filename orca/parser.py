"""
Orca parser: walk an argument vector once and answer queries about it.

What this module provides
- Config: immutable run options (diagnostic prefix, verbosity, positional
  limit, colors).
- Parser: the engine and its query facade.
  • The whole parse pass runs inside the constructor; there is no streaming.
  • Options are copied in, so the caller's declarations are never mutated.
  • Every fallible step records a fault instead of raising; only the most
    recent one is kept (last fault wins, both during the pass and for queries).

Token classification
- "--name" / "--name=value": one long option.
- "-x", "-xyz", "-xyf=value": a short cluster, expanded into one option per
  character; only its last option can carry an inline value.
- anything else (including "-" and ""): the value of the pending compound
  option when one is waiting, a positional argument otherwise.

Quick start
    import sys
    from orca import Parser, Config, flag, option

    parser = Parser(sys.argv, [
        flag("-v", "--verbose", descr="talk more"),
        option("-o", "--output", name="file", descr="output file", default="out.txt"),
    ], config=Config(positional_limit=1))

    if parser.last_error():
        sys.exit(parser.render_help("INPUT"))
    output = parser.value("-o")

Design notes
- The option awaiting a value is tracked as an index into the owned options
  tuple, never as a reference handed out to callers.
- Faults are exceptions (see orca.faults) so a host can opt into raising the
  last one with raise_for_error(); the parser itself never does.
"""
import copy
import os.path
import shlex
from collections import namedtuple

from .faults import *
from .limits import unlimited
from .options import Option
from .tokens import *
from .utils import *

Config = namedtuple("Config", (
    "error_prefix",
    "verbose",
    "positional_limit",
    "colorful",
), defaults=("orca error: ", True, unlimited, True))


def _sanitize_config(config, /):
    """
    Internal: validate a Config and return it unchanged.

    Raises
    - TypeError: when the config is not a Config or a field has the wrong type.
    - ValueError: when the positional limit is a negative integer.
    """
    if not isinstance(config, Config):
        raise TypeError("parser 'config' must be a Config")
    if not isinstance(config.error_prefix, str):
        raise TypeError("config 'error_prefix' must be a string")
    if not isinstance(config.verbose, bool):
        raise TypeError("config 'verbose' must be a boolean")
    if not isinstance(config.colorful, bool):
        raise TypeError("config 'colorful' must be a boolean")

    limit = config.positional_limit
    if limit is not unlimited:
        if isinstance(limit, bool) or not isinstance(limit, int):
            raise TypeError("config 'positional_limit' must be an integer or unlimited")
        if limit < 0:
            raise ValueError("config 'positional_limit' cannot be negative")
    return config


class Parser:
    """
    Parse an argument vector against a set of options.

    Parameters
    - argv: iterable of str, or a shell-like str (split with shlex; a string
      with unbalanced quotes is split on whitespace instead). Index 0 is the
      executable path; only its basename is kept (see `executable`).
    - options: iterable of Option.
    - defaults: default positional arguments (one string or an iterable),
      answered by argument(n) when fewer positionals were given.
    - config: Config.

    Raises
    - TypeError / ValueError for malformed declarations only. Command-line
      problems are recorded and reported through last_error().
    """

    def __init__(self, argv, options, defaults=Unset, config=Config()):
        self.config = _sanitize_config(config)

        owned = []
        for option in options:
            if not isinstance(option, Option):
                raise TypeError("parser 'options' must contain only Option instances")
            owned.append(copy.copy(option))
        self._options = tuple(owned)

        self._defaults = sequence(defaults, "parser defaults")
        self._arguments = []
        self._pending = None
        self._fault = None
        self.executable = ""

        if isinstance(argv, str):
            try:
                argv = shlex.split(argv)
            except ValueError:
                # unbalanced quotes: split on whitespace, quotes stay literal
                argv = argv.split()
        self._parseargs(sequence(argv, "parser argv"))

    @property
    def options(self):
        return self._options

    @property
    def arguments(self):
        return tuple(self._arguments)

    @property
    def defaults(self):
        return self._defaults

    @property
    def fault(self):
        """
        the most recent fault (a ParseFault instance) or None when the last
        operation succeeded.
        """
        return self._fault

    def trigger(self, fault, /, **options):
        """
        record `fault` as the most recent one and print it when verbose.
        """
        self._fault = trigger(fault, **{
            "error_prefix": self.config.error_prefix,
            "verbose": self.config.verbose,
            "colorful": self.config.colorful,
        } | options)

    def _lookup(self, alias, /):
        for index, option in enumerate(self._options):
            if option.has_alias(alias):
                return index
        return None

    def _load_option(self, raw, /):
        """
        process one resolved option token ('-f', '-f=x', '--file=x', ...).

        behavior
        - unknown alias: NOT_POSSIBLE_OPTION, nothing else changes for this token.
        - any option interrupting a pending one: MISSING_VALUE for the pending
          option, which stops waiting.
        - compound with '=value': value appended; with '=' but no value:
          MISSING_VALUE; without '=': becomes the pending option.
        - simple with '=': OPTION_CANT_HOLD_VALUE.
        """
        token = split(raw)
        index = self._lookup(token.option)

        if index is None:
            return self.trigger(NotPossibleOptionError(
                "option %r isn't a possible option" % token.option
            ), token=raw)

        option = self._options[index]
        option._provide()

        if self._pending is not None:
            pending = self._options[self._pending]
            self.trigger(MissingValueError(
                "got another option while previous option %r is waiting for a value" % pending.aliases[0]
            ), token=raw, option=pending)
            self._pending = None

        if option.is_compound():
            if not token.separator:
                self._pending = index
            elif token.value:
                option._supply(token.value)
            else:
                self.trigger(MissingValueError(
                    "expecting a value for the option %r after %r" % (token.option, SEPARATOR)
                ), token=raw, option=option)
        elif token.separator:
            self.trigger(OptionCantHoldValueError(
                "option %r is not compound and can't hold a value" % token.option
            ), token=raw, option=option)

    def _parseargs(self, argv, /):
        if argv:
            self.executable = os.path.basename(argv[0])

        for token in argv[1:]:
            if is_long(token):
                self._load_option(token)
            elif is_option(token):
                for subtoken in expand(token):
                    self._load_option(subtoken)
            elif self._pending is not None:
                self._options[self._pending]._supply(token)
                self._pending = None
            else:
                self._arguments.append(token)

        if self._pending is not None:
            pending = self._options[self._pending]
            self.trigger(MissingValueError(
                "missing value for option %r" % pending.aliases[0]
            ), option=pending)
            self._pending = None

        # unlimited compares greater than any count
        if len(self._arguments) > (limit := self.config.positional_limit):
            self.trigger(TooMuchArgumentsError(
                "unexpected amount of arguments: %d. maximum expected amount is: %d" % (
                    len(self._arguments), limit
                )
            ), count=len(self._arguments), limit=limit)

    def find_option(self, name, /, verbose=True):
        """
        Find an option by any of its aliases.

        Resets the last error; records OPTION_DOESNT_EXIST and returns None when
        nothing answers to `name`. `verbose=False` silences the diagnostic for
        this call only (Config.verbose=False silences every call).
        """
        self._fault = None
        index = self._lookup(name)
        if index is None:
            self.trigger(OptionDoesntExistError(
                "option %r doesn't exist" % name
            ), verbose=verbose and self.config.verbose, name=name)
            return None
        return self._options[index]

    def is_set(self, name, /):
        option = self.find_option(name)
        if option is None:
            return False
        return option.provided

    def value(self, name, /, index=0):
        """
        Value of a compound option, falling back to its defaults.

        Example: with "./prog -f bar.txt -f test.txt", value("-f") is 'bar.txt'
        and value("--file", 1) is 'test.txt'.
        """
        option = self.find_option(name)
        if option is None:
            return ""
        return option.value_at(index)

    def argument(self, number=0, /):
        if 0 <= number < len(self._arguments):
            return self._arguments[number]
        if 0 <= number < len(self._defaults):
            return self._defaults[number]
        return ""

    def render_help(self, positionals=Unset, /):
        """
        Build the auto-generated help page from the options' aliases, names and
        descriptions.

        `positionals` names the positional arguments shown at the end of the
        usage line ("ls /etc /usr" → ("DIR", "DIR")); one string or an iterable.

        Layout
            Usage:
            \t<executable> [-h] [-f[=]file] [message]

            Options:
            \t-h, --help
            \t\tprint help page
        """
        usage = [self.executable]
        blocks = []

        for option in self._options:
            if option.is_compound() and option.name:
                usage.append("[%s[%s]%s]" % (option.aliases[0], SEPARATOR, option.name))
            else:
                usage.append("[%s]" % option.aliases[0])
            blocks.append("\t%s\n\t\t%s\n" % (option.joined_aliases(), option.descr))

        usage.extend("[%s]" % name for name in sequence(positionals, "help positionals") if name)

        return "Usage:\n\t" + " ".join(usage) + "\n\nOptions:\n" + "".join(blocks)

    def last_error(self):
        if self._fault is None:
            return FaultCode.NO_ERROR
        return self._fault.code

    def raise_for_error(self):
        """
        raise a fresh copy of the most recent fault, if any. parsing and queries
        never raise on their own; this is the opt-in for hosts that prefer
        exceptions.
        """
        if self._fault is not None:
            raise self._fault.__replace__()

    def __rich_repr__(self):
        yield "executable", self.executable
        yield "arguments", self.arguments
        yield "options", self.options
        yield "error", self.last_error()


__all__ = (
    "Config",
    "Parser",
)
