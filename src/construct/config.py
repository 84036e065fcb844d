"""Derived names shared by the scaffolder and the CLI."""

from __future__ import annotations

from typing import Dict

from pydantic import BaseModel, ConfigDict, Field

__all__ = ["NameSet", "PLACEHOLDERS"]


PLACEHOLDERS = ("project_upper", "project_lower", "vendor_lower", "vendor_upper")


class NameSet(BaseModel):
    """Name variants derived from a ``vendor/project`` identifier.

    Attributes
    ----------
    raw:
        The identifier exactly as it was given on the command line.
    vendor_lower, project_lower:
        Lowercase segments, used for directory and package names.
    vendor_upper, project_upper:
        Studly cased segments, used for namespaces and class names.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    raw: str = Field(..., description="Identifier as supplied by the caller.")
    vendor_lower: str = Field(..., description="Lowercase vendor segment.")
    vendor_upper: str = Field(..., description="Studly cased vendor segment.")
    project_lower: str = Field(..., description="Lowercase project segment.")
    project_upper: str = Field(..., description="Studly cased project segment.")

    def context(self) -> Dict[str, str]:
        """Return the placeholder values keyed by token name."""

        return {token: getattr(self, token) for token in PLACEHOLDERS}
