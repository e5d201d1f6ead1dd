"""Model classes for hmui."""

from model.app_config import AppConfig, merge_config
from model.module import Module, ModuleRules, MountMode
from model.status import DeviceInfo, HymoFSState, StorageStatus, SystemInfo

__all__ = [
    "AppConfig",
    "merge_config",
    "Module",
    "ModuleRules",
    "MountMode",
    "DeviceInfo",
    "HymoFSState",
    "StorageStatus",
    "SystemInfo",
]
