"""Persisted configuration record of the mount manager."""

from __future__ import annotations

from dataclasses import dataclass, field, fields
from typing import Any, Mapping

from constants import DEFAULT_CONFIG
from model.schema import read_bool, read_str, read_str_list


def merge_config(defaults: Mapping[str, Any], remote: Mapping[str, Any]) -> dict[str, Any]:
    """Shallow key-wise merge where remote values win.

    For every key k: result[k] = remote[k] if k in remote else defaults[k].
    """
    return {**defaults, **remote}


@dataclass
class AppConfig:
    """Configuration of the mount manager, always fully populated.

    Keys the panel does not know about are kept in ``extras`` and written
    back unchanged on save.
    """

    moduledir: str = DEFAULT_CONFIG["moduledir"]
    mountsource: str = DEFAULT_CONFIG["mountsource"]
    partitions: list[str] = field(default_factory=lambda: list(DEFAULT_CONFIG["partitions"]))
    overlay_mode: str = DEFAULT_CONFIG["overlay_mode"]  # "tmpfs", "ext4" or "erofs"
    disable_umount: bool = DEFAULT_CONFIG["disable_umount"]
    allow_umount_coexistence: bool = DEFAULT_CONFIG["allow_umount_coexistence"]
    logfile: str | None = DEFAULT_CONFIG["logfile"]
    hymofs_debug: bool | None = DEFAULT_CONFIG["hymofs_debug"]
    hymofs_stealth: bool | None = DEFAULT_CONFIG["hymofs_stealth"]
    extras: dict[str, Any] = field(default_factory=dict)

    @classmethod
    def defaults(cls) -> AppConfig:
        """Fresh copy of the compiled-in default record."""
        return cls.from_dict(DEFAULT_CONFIG)

    @classmethod
    def field_names(cls) -> list[str]:
        """Names of the known (wire) fields, excluding extras."""
        return [f.name for f in fields(cls) if f.name != "extras"]

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> AppConfig:
        """Build a record from wire data, filling gaps from DEFAULT_CONFIG.

        Raises:
            MalformedOutputError: If a known field has the wrong type
        """
        merged = merge_config(DEFAULT_CONFIG, data)
        known = set(cls.field_names())
        return cls(
            moduledir=read_str(merged, "moduledir"),
            mountsource=read_str(merged, "mountsource"),
            partitions=read_str_list(merged, "partitions"),
            overlay_mode=read_str(merged, "overlay_mode"),
            disable_umount=read_bool(merged, "disable_umount"),
            allow_umount_coexistence=read_bool(merged, "allow_umount_coexistence"),
            logfile=read_str(merged, "logfile", nullable=True),
            hymofs_debug=read_bool(merged, "hymofs_debug", nullable=True),
            hymofs_stealth=read_bool(merged, "hymofs_stealth", nullable=True),
            extras={k: v for k, v in data.items() if k not in known},
        )

    def to_dict(self) -> dict[str, Any]:
        """Wire form: known fields, then extras. Cleared optional fields are null."""
        result: dict[str, Any] = {}
        for name in self.field_names():
            value = getattr(self, name)
            result[name] = list(value) if isinstance(value, list) else value
        for key, value in self.extras.items():
            result.setdefault(key, value)
        return result
