"""Scaffold basic PHP packages from a ``vendor/project`` identifier.

The package validates the identifier, derives lowercase and studly cased name
variants from it, and writes a fixed set of stub documents into a new project
directory. It can be used programmatically or through the ``construct``
command line interface.
"""

from __future__ import annotations

from .config import NameSet
from .errors import InvalidNameError, ScaffoldError
from .naming import is_valid, parse, split, to_camel, to_lower, to_studly
from .scaffold import SCAFFOLD_STEPS, ScaffoldEngine, ScaffoldStep, StubTemplate
from .template import StubRenderer

__all__ = [
    "InvalidNameError",
    "NameSet",
    "SCAFFOLD_STEPS",
    "ScaffoldEngine",
    "ScaffoldError",
    "ScaffoldStep",
    "StubRenderer",
    "StubTemplate",
    "is_valid",
    "parse",
    "split",
    "to_camel",
    "to_lower",
    "to_studly",
]

__version__ = "0.1.0"
