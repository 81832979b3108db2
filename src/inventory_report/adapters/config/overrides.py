"""``--set SECTION.KEY=VALUE`` assignments layered over a loaded Config."""

from __future__ import annotations

from dataclasses import dataclass
from typing import cast

import orjson
from lib_layered_config import Config

CoercedValue = str | int | float | bool | None | list[object] | dict[str, object]
"""Values :func:`coerce_value` can produce."""


@dataclass(frozen=True, slots=True)
class ConfigOverride:
    """One ``--set`` assignment: a section, a key path below it and a value."""

    section: str
    key_path: tuple[str, ...]
    value: CoercedValue

    @property
    def dotted(self) -> str:
        """The assignment's path as typed, e.g. ``report.preview_chars``."""
        return ".".join((self.section, *self.key_path))


def parse_override(raw: str) -> ConfigOverride:
    """Split ``raw`` at its first ``=`` into a dotted path and a value.

    Raises:
        ValueError: If ``=`` is missing, the path has no dot, or a path
            component is empty.

    Examples:
        >>> override = parse_override("report.preview_chars=500")
        >>> override.section, override.key_path, override.value
        ('report', ('preview_chars',), 500)

        >>> parse_override("report.date_format=%d.%m.%Y").value
        '%d.%m.%Y'

        >>> parse_override("lib_log_rich.payload_limits.max_chars=8192").dotted
        'lib_log_rich.payload_limits.max_chars'
    """
    path, sep, value = raw.partition("=")
    if not sep:
        raise ValueError(f"Invalid override {raw!r}: must contain '='")
    section, dot, rest = path.partition(".")
    if not dot:
        raise ValueError(f"Invalid override {raw!r}: key must contain at least one dot (SECTION.KEY)")
    if not section:
        raise ValueError(f"Invalid override {raw!r}: section name is empty")
    key_path = tuple(rest.split("."))
    if "" in key_path:
        raise ValueError(f"Invalid override {raw!r}: key path has an empty component")
    return ConfigOverride(section, key_path, coerce_value(value))


def coerce_value(raw: str) -> CoercedValue:
    """Read ``raw`` as a JSON literal; anything that is not one stays a string.

    Examples:
        >>> coerce_value("true"), coerce_value("300"), coerce_value("null")
        (True, 300, None)
        >>> coerce_value('"  "')
        '  '
        >>> coerce_value("reports/stock.xml")
        'reports/stock.xml'
        >>> coerce_value("")
        ''
    """
    if not raw:
        return raw
    try:
        return orjson.loads(raw)
    except orjson.JSONDecodeError:
        return raw


def _assign(tree: dict[str, object], override: ConfigOverride) -> None:
    """Set ``override`` inside ``tree``, creating tables along its path.

    Examples:
        >>> tree: dict[str, object] = {}
        >>> _assign(tree, parse_override("report.save=true"))
        >>> tree
        {'report': {'save': True}}
    """
    *parents, leaf = (override.section, *override.key_path)
    node = tree
    for name in parents:
        child = node.setdefault(name, {})
        if not isinstance(child, dict):
            raise ValueError(f"Invalid override {override.dotted!r}: {name!r} already holds a value")
        node = cast("dict[str, object]", child)
    node[leaf] = override.value


def apply_overrides(config: Config, raw_overrides: tuple[str, ...]) -> Config:
    """Return ``config`` with every assignment in ``raw_overrides`` merged in.

    Later assignments win over earlier ones for the same key. With no
    assignments ``config`` itself comes back.

    Raises:
        ValueError: If an assignment is malformed or descends through a
            key an earlier one set to a plain value.

    Examples:
        >>> cfg = Config({"report": {"save": False}}, {})
        >>> apply_overrides(cfg, ("report.save=true",))["report"]["save"]
        True
        >>> apply_overrides(cfg, ()) is cfg
        True
    """
    if not raw_overrides:
        return config
    tree: dict[str, object] = {}
    for raw in raw_overrides:
        _assign(tree, parse_override(raw))
    return config.with_overrides(tree)


__all__ = [
    "CoercedValue",
    "ConfigOverride",
    "apply_overrides",
    "coerce_value",
    "parse_override",
]
