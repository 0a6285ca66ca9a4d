"""
ConfigMap patch command builder.

Properties are given in a flag-style mini syntax::

    -key1 value1 -key2 "value with spaces" -key3 ${ENV_VAR}

and turned into an ``oc patch configmap`` command whose JSON payload carries
the pairs under ``data``.
"""

import json
import logging
import shlex
from typing import List, Mapping, Optional, Tuple

from ockit.core.interpolate import interpolate

logger = logging.getLogger(__name__)


def parse_properties(properties: Optional[str]) -> List[Tuple[str, str]]:
    """
    Parse a flag-style property string into ordered key/value pairs.

    Args:
        properties: String such as '-key1 value1 -key2 "value 2"'

    Returns:
        List of (key, value) pairs in input order; values keep any
        ``${NAME}`` placeholders

    Raises:
        ValueError: If a value appears without a preceding -key
    """
    if not properties:
        return []

    pairs: List[Tuple[str, str]] = []
    tokens = shlex.split(properties)
    i = 0
    while i < len(tokens):
        token = tokens[i]
        if not token.startswith("-") or len(token) == 1:
            raise ValueError(f"Expected a -key before '{token}' in '{properties}'")

        key = token[1:]
        if i + 1 < len(tokens) and not _is_key(tokens[i + 1]):
            pairs.append((key, tokens[i + 1]))
            i += 2
        else:
            pairs.append((key, ""))
            i += 1

    return pairs


def _is_key(token: str) -> bool:
    return token.startswith("-") and len(token) > 1 and not token[1].isdigit()


class ConfigMap:
    """A named ConfigMap and the properties to patch into it."""

    def __init__(self, name: str, properties: Optional[str]):
        self.name = name
        self.properties = properties or ""

    def pairs(self, env: Optional[Mapping[str, str]] = None) -> List[Tuple[str, str]]:
        """Return the parsed pairs with placeholders interpolated."""
        return [
            (key, interpolate(value, env))
            for key, value in parse_properties(self.properties)
        ]

    def payload(self, env: Optional[Mapping[str, str]] = None) -> str:
        """Return the JSON patch body, e.g. ``{"data":{"key1": "value1"}}``."""
        data = ", ".join(
            f"{json.dumps(key, ensure_ascii=False)}: {json.dumps(value, ensure_ascii=False)}"
            for key, value in self.pairs(env)
        )
        return f'{{"data":{{{data}}}}}'

    def patch_args(
        self, namespace: Optional[str], env: Optional[Mapping[str, str]] = None
    ) -> List[str]:
        """Return the oc arguments for the patch, without shell quoting."""
        args = ["patch", "configmap", self.name, "-p", self.payload(env)]
        if namespace:
            args += ["-n", namespace]
        return args

    def patch_cmd(
        self, namespace: Optional[str], env: Optional[Mapping[str, str]] = None
    ) -> str:
        """
        Build the oc patch command for this ConfigMap.

        Args:
            namespace: Target namespace; omitted from the command if empty
            env: Environment used for interpolation (defaults to ``os.environ``)

        Returns:
            Command string without the leading 'oc', e.g.
            ``patch configmap foo -p '{"data":{"key1": "value1"}}' -n my-space``
        """
        cmd = f"patch configmap {self.name} -p '{self.payload(env)}'"
        if namespace:
            cmd += f" -n {namespace}"

        logger.debug(f"ConfigMap patch command: {cmd}")
        return cmd
