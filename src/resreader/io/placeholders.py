"""``${NAME}`` / ``${NAME:default}`` expansion for location strings."""

from __future__ import annotations

import re
from typing import Mapping

from resreader.errors import ResourceLocationError

__all__ = ["resolve_placeholders"]

_PLACEHOLDER = re.compile(r"\$\{(?P<name>[^}:]+)(?::(?P<default>[^}]*))?\}")


def resolve_placeholders(
    text: str,
    environ: Mapping[str, str],
    *,
    ignore_unresolvable: bool = True,
) -> str:
    """Substitute placeholders in ``text`` from ``environ``.

    Values are not re-scanned, so a value containing ``${...}`` is used
    literally.

    Raises:
        ResourceLocationError: If a placeholder has neither a value nor a
            default and ``ignore_unresolvable`` is false.

    Example:
        >>> resolve_placeholders("${ROOT}/app.txt", {"ROOT": "/srv"})
        '/srv/app.txt'
        >>> resolve_placeholders("${MISSING:conf}/a", {})
        'conf/a'
        >>> resolve_placeholders("${MISSING}/a", {})
        '${MISSING}/a'
    """

    def _replace(match: re.Match[str]) -> str:
        name = match.group("name").strip()
        if name in environ:
            return environ[name]
        default = match.group("default")
        if default is not None:
            return default
        if ignore_unresolvable:
            return match.group(0)
        raise ResourceLocationError(
            f"Could not resolve placeholder {name!r} in value {text!r}"
        )

    return _PLACEHOLDER.sub(_replace, text)
