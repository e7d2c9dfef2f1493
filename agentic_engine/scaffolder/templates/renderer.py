"""Jinja2 rendering for the inline template literals.

The document text lives as Python string constants beside the functions that
select it.  Templates with option-dependent sections use ``{% if %}`` blocks
and ``{{ }}`` substitutions, rendered here through one shared environment.
"""

from __future__ import annotations

from functools import lru_cache
from typing import Any

from jinja2 import Environment, StrictUndefined, Template


# Output is Markdown, YAML and shell, never HTML, so nothing is escaped.
_ENV = Environment(
    autoescape=False,
    keep_trailing_newline=True,
    trim_blocks=True,
    lstrip_blocks=True,
    undefined=StrictUndefined,
)


@lru_cache(maxsize=None)
def _compile(source: str) -> Template:
    return _ENV.from_string(source)


def render_string(source: str, **context: Any) -> str:
    """Render an inline template string with the provided context.

    Raises:
        jinja2.UndefinedError: If the template uses a name missing from
            *context*.
    """
    return _compile(source).render(**context)
