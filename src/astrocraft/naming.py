"""Identifier conversions used for file names, element names and imports."""

from __future__ import annotations

import re

__all__ = ["capitalize", "to_camel", "to_dash", "to_pascal"]


_WORD_BOUNDARY = re.compile(r"([a-z])([A-Z])")
_WHITESPACE = re.compile(r"\s+")
_SEPARATOR_RUN = re.compile(r"-+(.?)", re.DOTALL)


def to_dash(value: str) -> str:
    """Return the dash form of ``value``.

    A hyphen is inserted wherever an upper-case letter directly follows a
    lower-case one, whitespace runs become a single hyphen and the result is
    lower-cased::

        >>> to_dash("UserProfile")
        'user-profile'
        >>> to_dash("main layout")
        'main-layout'
    """

    text = _WORD_BOUNDARY.sub(r"\1-\2", value)
    text = _WHITESPACE.sub("-", text)
    return text.lower()


def to_camel(value: str) -> str:
    """Drop every hyphen and upper-case the character following it."""

    return _SEPARATOR_RUN.sub(lambda match: match.group(1).upper(), value)


def capitalize(value: str) -> str:
    """Upper-case the first character only.

    Unlike :meth:`str.capitalize` the remaining characters are left alone.
    """

    return value[:1].upper() + value[1:]


def to_pascal(value: str) -> str:
    return capitalize(to_camel(value))
