"""Placeholder substitution for the project templates."""

from __future__ import annotations

import re
from typing import Mapping

__all__ = ["TemplateRenderingError", "render"]


# Single braces (f-strings, TOML inline tables) are never placeholders.
_PLACEHOLDER = re.compile(r"{{\s*(?P<key>[A-Za-z_][A-Za-z0-9_]*)\s*}}")


class TemplateRenderingError(RuntimeError):
    """Raised when a template refers to a value the context does not provide."""


def render(template: str, context: Mapping[str, str]) -> str:
    """Replace every ``{{ key }}`` in ``template`` with ``context[key]``."""

    def substitute(match: re.Match[str]) -> str:
        key = match.group("key")
        try:
            return context[key]
        except KeyError:
            raise TemplateRenderingError(f"missing value for '{key}'") from None

    return _PLACEHOLDER.sub(substitute, template)
