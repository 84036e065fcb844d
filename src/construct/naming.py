"""Validation and case conversion for ``vendor/project`` identifiers."""

from __future__ import annotations

import re
import string

from .config import NameSet
from .errors import InvalidNameError

__all__ = ["is_valid", "parse", "split", "to_camel", "to_lower", "to_studly"]


NAME_PATTERN = re.compile(r"[A-Za-z0-9][A-Za-z0-9_.-]*/[A-Za-z0-9][A-Za-z0-9_.-]*")
_WORD_SEPARATORS = re.compile(r"[-_]+")
_ASCII_LOWER = str.maketrans(string.ascii_uppercase, string.ascii_lowercase)


def is_valid(name: str) -> bool:
    """Return ``True`` when ``name`` matches ``vendor/project`` over its whole span."""

    return NAME_PATTERN.fullmatch(name) is not None


def split(name: str) -> tuple[str, str]:
    """Split ``name`` on the first ``/`` into ``(vendor, project)``."""

    vendor, _, project = name.partition("/")
    return vendor, project


def to_lower(value: str) -> str:
    """Lowercase the ASCII letters of ``value``, leaving anything else untouched."""

    return value.translate(_ASCII_LOWER)


def to_studly(value: str) -> str:
    """Convert ``value`` to studly case.

    Hyphens and underscores separate words. The first letter of every word is
    uppercased and the remaining letters are kept as they are, so
    ``my-cool_thing`` becomes ``MyCoolThing``.
    """

    words = _WORD_SEPARATORS.split(value)
    return "".join(word[:1].upper() + word[1:] for word in words if word)


def to_camel(value: str, *, capitalize_first: bool = False) -> str:
    """Convert ``value`` to camel case (``my-app`` -> ``myApp``)."""

    studly = to_studly(value)
    if capitalize_first:
        return studly
    return studly[:1].lower() + studly[1:]


def parse(raw: str) -> NameSet:
    """Validate ``raw`` and derive the name variants used by the scaffolder.

    Raises
    ------
    InvalidNameError
        If ``raw`` is not a ``vendor/project`` identifier.
    """

    if not is_valid(raw):
        raise InvalidNameError(raw)

    vendor, project = split(raw)
    return NameSet(
        raw=raw,
        vendor_lower=to_lower(vendor),
        vendor_upper=to_studly(vendor),
        project_lower=to_lower(project),
        project_upper=to_studly(project),
    )
