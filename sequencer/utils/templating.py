"""Asset path templating.

Paths use ``str.format`` placeholders, e.g. ``"jb2a/fire_{color}_{size}.webm"``.
"""

from __future__ import annotations

from typing import Any, Callable, Mapping

from sequencer.errors import ConfigurationError

TemplateRenderer = Callable[[str, Mapping[str, Any]], str]


def render_path(template: str, context: Mapping[str, Any]) -> str:
    """Substitute ``context`` into ``template``."""
    try:
        return template.format_map(context)
    except KeyError as e:
        raise ConfigurationError(
            f"Path template {template!r} references unknown key {e.args[0]!r}"
        ) from e
    except (ValueError, IndexError) as e:
        raise ConfigurationError(f"Malformed path template {template!r}: {e}") from e
