r"""
Orca tokenizer: turn raw command-line tokens into option triples.

Responsibilities
- split(): inline-value splitting of one option token.
  '--file=foo.txt' → Token('--file', 'foo.txt', True)
  '-f'             → Token('-f', '', False)
  '-f='            → Token('-f', '', True)     (separator present, value empty)
  '--x=a=b'        → Token('--x', 'a=b', True) (split happens once)
- expand(): short-cluster expansion of a single-dash token.
  '-laf=foo.txt'   → ['-l', '-a', '-f=foo.txt']
  '-la'            → ['-l', '-a']
  The first character followed by the separator takes the rest of the token
  as its inline value, so only the last flag of a cluster can carry one.

The separator is fixed to '=' and is not configurable.
"""
from collections import namedtuple

SEPARATOR = "="

Token = namedtuple("Token", ("option", "value", "separator"))


def is_option(token, /):
    """
    whether a raw token names an option: a leading '-' and more than one character.
    a lone '-' (conventionally stdin) and the empty string are plain arguments.
    """
    return len(token) > 1 and token.startswith("-")


def is_long(token, /):
    """
    whether an option token uses the long form ('--name' / '--name=value').
    """
    return is_option(token) and token[1] == "-"


def split(token, /):
    option, separator, value = token.partition(SEPARATOR)
    return Token(option, value, bool(separator))


def expand(token, /):
    """
    expand a short cluster into one sub-token per option.

    walks the characters after the leading '-'; when the next character is the
    separator, the remainder of the token (from the current character on) is
    emitted as one '-x=value' sub-token and the walk stops.
    """
    tokens = []
    body = token[1:]
    for index, char in enumerate(body):
        if body[index + 1:index + 2] == SEPARATOR:
            tokens.append("-" + body[index:])
            break
        tokens.append("-" + char)
    return tokens


__all__ = (
    "SEPARATOR",
    "Token",
    "is_option",
    "is_long",
    "split",
    "expand",
)
