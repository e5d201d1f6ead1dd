"""Module descriptors and per-module mount rules."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Mapping

from errors import MalformedOutputError
from model.schema import read_bool, read_object, read_str


class MountMode(Enum):
    """Strategy applied to a module or to one of its paths."""

    OVERLAY = "overlay"  # OverlayFS backed
    MAGIC = "magic"  # Magic bind mounts
    IGNORE = "ignore"  # Not mounted
    HYMOFS = "hymofs"  # HymoFS kernel redirection

    @classmethod
    def parse(cls, value: Any, context: str = "mode") -> MountMode:
        """Parse a wire value, raising MalformedOutputError for unknown modes."""
        try:
            return cls(value)
        except ValueError:
            raise MalformedOutputError(f"Unknown mount mode for {context}: {value!r}")


@dataclass
class ModuleRules:
    """Default mount mode plus per-path overrides (relative path -> mode)."""

    default_mode: MountMode = MountMode.OVERLAY
    paths: dict[str, MountMode] = field(default_factory=dict)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> ModuleRules:
        default_mode = MountMode.parse(read_str(data, "default_mode", MountMode.OVERLAY.value), "default_mode")
        raw_paths = read_object(data, "paths", {})
        paths = {}
        for path, mode in raw_paths.items():
            paths[path] = MountMode.parse(mode, f"path '{path}'")
        return cls(default_mode=default_mode, paths=paths)

    def to_dict(self) -> dict[str, Any]:
        return {
            "default_mode": self.default_mode.value,
            "paths": {path: mode.value for path, mode in self.paths.items()},
        }


@dataclass
class Module:
    """A module found by the mount manager's scan."""

    id: str
    name: str = ""
    version: str = ""
    author: str = ""
    description: str = ""
    mode: str = "auto"  # Display label, e.g. "auto", "magic", "hymofs"
    is_mounted: bool = False
    rules: ModuleRules = field(default_factory=ModuleRules)
    enabled: bool | None = None
    source_path: str | None = None

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> Module:
        """Build a module from one entry of the `modules` command output.

        Raises:
            MalformedOutputError: If the entry is not an object or has bad fields
        """
        if not isinstance(data, dict):
            raise MalformedOutputError("Module entry must be an object")
        rules_data = read_object(data, "rules", {})
        return cls(
            id=read_str(data, "id"),
            name=read_str(data, "name", ""),
            version=read_str(data, "version", ""),
            author=read_str(data, "author", ""),
            description=read_str(data, "description", ""),
            mode=read_str(data, "mode", "auto"),
            is_mounted=read_bool(data, "is_mounted", False),
            rules=ModuleRules.from_dict(rules_data),
            enabled=read_bool(data, "enabled", None),
            source_path=read_str(data, "source_path", None),
        )

    def to_dict(self) -> dict[str, Any]:
        result: dict[str, Any] = {
            "id": self.id,
            "name": self.name,
            "version": self.version,
            "author": self.author,
            "description": self.description,
            "mode": self.mode,
            "is_mounted": self.is_mounted,
            "rules": self.rules.to_dict(),
        }
        if self.enabled is not None:
            result["enabled"] = self.enabled
        if self.source_path is not None:
            result["source_path"] = self.source_path
        return result
