"""Fixture-backed client with simulated latency, for development and offline use."""

from __future__ import annotations

import asyncio
import logging
from typing import Any

from api.client import Client
from api.codec import decode_payload, encode_payload
from constants import APP_VERSION, MOCK_DELAYS
from model import (
    AppConfig,
    DeviceInfo,
    HymoFSState,
    Module,
    ModuleRules,
    StorageStatus,
    SystemInfo,
)

log = logging.getLogger(__name__)

MOCK_MODULES: list[dict[str, Any]] = [
    {
        "id": "magisk_module_1",
        "name": "Example Module",
        "version": "1.0.0",
        "author": "Developer",
        "description": "Mock module",
        "mode": "magic",
        "is_mounted": True,
        "rules": {"default_mode": "magic", "paths": {"system/fonts": "overlay"}},
    },
    {
        "id": "overlay_module_2",
        "name": "System UI Overlay",
        "version": "2.5",
        "author": "Google",
        "description": "Changes system colors.",
        "mode": "auto",
        "is_mounted": True,
        "rules": {"default_mode": "overlay", "paths": {}},
    },
    {
        "id": "hymofs_module_3",
        "name": "HymoFS Module",
        "version": "1.2",
        "author": "Dev",
        "description": "A hymofs module.",
        "mode": "hymofs",
        "is_mounted": True,
        "rules": {"default_mode": "hymofs", "paths": {}},
    },
]

MOCK_LOGS = (
    "[I] hybrid-mount starting\n"
    "[I] storage: erofs image mounted at /data/adb/meta-hybrid/mnt\n"
    "[I] mounted 3 modules (1 magic, 1 overlay, 1 hymofs)\n"
)


class MockClient(Client):
    """Same contract as RealClient, served from in-memory fixtures.

    Saved config and rules are kept as encoded payloads so writes go through
    the same codec as the real channel.
    """

    backend = "mock"

    def __init__(self, latency: float = 1.0) -> None:
        self.latency = latency
        self._config_payload = encode_payload(AppConfig.defaults().to_dict())
        self._rules_payloads: dict[str, str] = {}
        self._hymofs_loaded = True

    async def _delay(self, operation: str) -> None:
        await asyncio.sleep(MOCK_DELAYS[operation] * self.latency)

    async def load_config(self) -> AppConfig:
        await self._delay("load_config")
        return AppConfig.from_dict(decode_payload(self._config_payload))

    async def save_config(self, config: AppConfig) -> None:
        await self._delay("save_config")
        self._config_payload = encode_payload(config.to_dict())
        log.debug("Mock config saved")

    async def reset_config(self) -> None:
        await self._delay("reset_config")
        self._config_payload = encode_payload(AppConfig.defaults().to_dict())

    async def scan_modules(self) -> list[Module]:
        await self._delay("scan_modules")
        modules = []
        for entry in MOCK_MODULES:
            module = Module.from_dict(entry)
            payload = self._rules_payloads.get(module.id)
            if payload:
                module.rules = ModuleRules.from_dict(decode_payload(payload))
            modules.append(module)
        return modules

    async def save_module_rules(self, module_id: str, rules: ModuleRules) -> None:
        await self._delay("save_module_rules")
        self._rules_payloads[module_id] = encode_payload(rules.to_dict())

    async def get_device_status(self) -> DeviceInfo:
        await self._delay("get_device_status")
        return DeviceInfo(
            model="Pixel 8 Pro (Mock)",
            android="14 (API 34)",
            kernel="5.15.110-android14-11",
            selinux="Enforcing",
        )

    async def get_version(self) -> str:
        await self._delay("get_version")
        return APP_VERSION

    async def get_storage_usage(self) -> StorageStatus:
        await self._delay("get_storage_usage")
        return StorageStatus(type="erofs")

    async def get_system_info(self) -> SystemInfo:
        await self._delay("get_system_info")
        return SystemInfo(
            kernel="Linux localhost 5.15.0 #1 SMP PREEMPT",
            selinux="Enforcing",
            mount_base="/data/adb/meta-hybrid/mnt",
            active_mounts=["system", "product"],
            zygisksu_enforce="1",
            tmpfs_xattr_supported=False,
            abi="aarch64",
            hymofs_state=HymoFSState(
                loaded=self._hymofs_loaded,
                version=12,
                active_features=["debug", "stealth"] if self._hymofs_loaded else [],
                error_msg=None,
            ),
        )

    async def read_logs(self, path: str | None = None) -> str:
        await self._delay("read_logs")
        return MOCK_LOGS

    async def fetch_system_color(self) -> str | None:
        await self._delay("fetch_system_color")
        return None

    async def open_link(self, url: str) -> None:
        log.info(f"Mock open link: {url}")

    async def reboot(self) -> None:
        await self._delay("reboot")
        log.info("Mock reboot")

    async def unload_hymofs(self) -> None:
        await self._delay("unload_hymofs")
        self._hymofs_loaded = False
        log.info("Mock HymoFS unloaded")
