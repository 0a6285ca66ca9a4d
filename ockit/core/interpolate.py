"""
Environment variable interpolation.

Replaces ``${NAME}`` references in a string with values taken from an explicit
environment snapshot. References to unknown names are left as written.
"""

import os
import re
from typing import Mapping, Optional

_PLACEHOLDER = re.compile(r"\$\{([A-Za-z_][A-Za-z0-9_]*)\}")


def interpolate(text: str, env: Optional[Mapping[str, str]] = None) -> str:
    """
    Substitute ``${NAME}`` placeholders in text.

    Args:
        text: String that may contain placeholders
        env: Environment snapshot (defaults to a copy of ``os.environ``)

    Returns:
        String with known placeholders replaced

    Example:
        >>> interpolate("-n ${NS}", {"NS": "dev"})
        '-n dev'
    """
    if not text:
        return text or ""

    if env is None:
        env = dict(os.environ)

    def _replace(match: "re.Match[str]") -> str:
        name = match.group(1)
        return env.get(name, match.group(0))

    return _PLACEHOLDER.sub(_replace, text)
