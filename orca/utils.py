import functools
from collections.abc import Iterable, Sequence
from typing import final


@final
class UnsetType:
    """
    internal singleton sentinel representing an "unset" value.

    intent
    - used by the internal API to distinguish "not provided" from a user‑supplied
      value (including None, empty strings and empty collections).
    - although this class is importable, it is intended for internal use only.

    behavior
    - truthiness: bool(Unset) is False.
    - identity: Unset is a process‑wide singleton (see __new__).
    - display: repr(Unset) -> "Unset".
    - final: subclassing is forbidden to preserve semantics (see __init_subclass__).
    """

    @functools.cache
    def __new__(cls):
        return super().__new__(cls)

    def __bool__(self):
        return False

    def __repr__(self):
        return "Unset"

    def __reduce__(self):
        return UnsetType, ()

    def __init_subclass__(cls):
        raise TypeError("type 'UnsetType' is not an acceptable base type")


Unset = UnsetType()


def nullify(object, default=None, /):
    """
    internal helper: return `default` when `object` is Unset; otherwise return `object`.
    """
    return default if object is Unset else object


def rename(x, /, name=None):
    """
    set a stable __name__/__qualname__ on a callable, or return a curried renamer.

    parameters
    - x: callable | str
      • callable → rename in place.
      • str      → desired name; returns a callable that will rename a future function.
    - name: str
      target name to assign.

    errors
    - TypeError if a callable is given and the name is not a string.
    """
    if isinstance(x, str):
        return functools.partial(rename, name=x)
    if not isinstance(name, str):
        raise TypeError("callable name must be a string")
    x.__qualname__ = name
    x.__name__ = name
    return x


def sequence(object, /, what="values"):
    """
    internal: normalize "one string or an iterable of strings" into a tuple of strings.

    intent
    - lets declarations pass a single default (`default="out.txt"`) or many
      (`default=("a", "b")`) without overloads.

    rules
    - Unset / None → empty tuple.
    - str          → one-element tuple.
    - Iterable     → tuple, every element must be a string.

    errors
    - TypeError when the object is neither a string nor an iterable of strings;
      `what` names the offending field in the message.
    """
    if object is Unset or object is None:
        return ()
    if isinstance(object, str):
        return (object,)
    if not isinstance(object, Iterable):
        raise TypeError(f"{what} must be a string or an iterable of strings")
    items = tuple(object)
    if not all(isinstance(item, str) for item in items):
        raise TypeError(f"{what} must contain only strings")
    return items


def view(name):
    """
    internal: build a read-only property over a private backing field.

    storage convention
    - the value lives under "_" + name on the instance.

    behavior
    - a non-str Sequence is exposed as a tuple so callers cannot mutate the
      backing list; any other value is returned as-is.
    """

    @rename(name)
    def getter(self):
        value = getattr(self, "_" + name)
        if isinstance(value, Sequence) and not isinstance(value, str):
            return tuple(value)
        return value

    return property(getter)


__all__ = (
    "UnsetType",
    "Unset",
    "nullify",
    "rename",
    "sequence",
    "view",
)
