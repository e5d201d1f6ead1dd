"""Status records assembled from system queries and the daemon state file."""

from __future__ import annotations

from dataclasses import asdict, dataclass, field
from typing import Any, Mapping

from constants import (
    FALLBACK_ANDROID,
    FALLBACK_KERNEL,
    FALLBACK_MODEL,
    FALLBACK_SELINUX,
    UNKNOWN_FIELD,
)
from model.schema import read_bool, read_int, read_str, read_str_list


@dataclass
class StorageStatus:
    """Backing storage of the mount base.

    type is one of "tmpfs", "ext4", "erofs", "unknown", or None when the
    daemon state could not be read.
    """

    type: str | None = None
    error: str | None = None

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)


@dataclass
class HymoFSState:
    """State of the HymoFS kernel module."""

    loaded: bool = False
    version: int = 0
    active_features: list[str] = field(default_factory=list)
    error_msg: str | None = None

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> HymoFSState:
        return cls(
            loaded=read_bool(data, "loaded", False),
            version=read_int(data, "version", 0),
            active_features=read_str_list(data, "active_features", []),
            error_msg=read_str(data, "error_msg", None),
        )


@dataclass
class SystemInfo:
    """Kernel, SELinux and mount topology facts.

    Structurally complete even when every query fails: required fields hold
    the "-" sentinel and an empty mount list.
    """

    kernel: str = UNKNOWN_FIELD
    selinux: str = UNKNOWN_FIELD
    mount_base: str = UNKNOWN_FIELD
    active_mounts: list[str] = field(default_factory=list)
    zygisksu_enforce: str | None = None  # "1" or "0"
    supported_overlay_modes: list[str] | None = None
    tmpfs_xattr_supported: bool | None = None
    abi: str | None = None
    hymofs_state: HymoFSState | None = None

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)


@dataclass
class DeviceInfo:
    """Device identity, always populated (literal fallbacks on failure)."""

    model: str = FALLBACK_MODEL
    android: str = FALLBACK_ANDROID
    kernel: str = FALLBACK_KERNEL
    selinux: str = FALLBACK_SELINUX

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)
