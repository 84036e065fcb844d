"""Placeholder substitution for the packaged stub documents."""

from __future__ import annotations

import re
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, Mapping

__all__ = ["StubRenderer"]


_PLACEHOLDER_PATTERN = re.compile(r"{(?P<token>[a-z_]+)}")


@dataclass(slots=True)
class StubRenderer:
    """Replace ``{token}`` placeholders with values from a context mapping."""

    encoding: str = "utf-8"

    def render_string(
        self,
        template: str,
        context: Mapping[str, str],
        tokens: Iterable[str] | None = None,
    ) -> str:
        """Render ``template`` using ``context``.

        Parameters
        ----------
        template:
            The stub text.
        context:
            Values keyed by token name, without braces.
        tokens:
            Restrict substitution to these tokens. Defaults to every key of
            ``context``.

        Placeholders outside ``tokens`` or missing from ``context`` are kept
        verbatim.
        """

        allowed = set(context if tokens is None else tokens)

        def substitute(match: re.Match[str]) -> str:
            token = match.group("token")
            if token not in allowed or token not in context:
                return match.group(0)
            return str(context[token])

        return _PLACEHOLDER_PATTERN.sub(substitute, template)

    def render_file(
        self,
        template_path: str | Path,
        context: Mapping[str, str],
        *,
        tokens: Iterable[str] | None = None,
        target: str | Path | None = None,
    ) -> str:
        """Render ``template_path`` and optionally write the result to ``target``."""

        text = Path(template_path).read_text(encoding=self.encoding)
        rendered = self.render_string(text, context, tokens)

        if target is not None:
            Path(target).write_text(rendered, encoding=self.encoding)

        return rendered
