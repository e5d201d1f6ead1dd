"""The client contract shared by the real and mock implementations."""

from __future__ import annotations

import logging
import webbrowser
from abc import ABC, abstractmethod
from typing import ClassVar

from api.accent import resolve_accent_color
from api.commands import CommandSet
from api.config_service import ConfigService
from api.executor import Executor, run_write
from api.modules import ModuleService
from api.status import StatusAggregator
from model import AppConfig, DeviceInfo, Module, ModuleRules, StorageStatus, SystemInfo
from settings import Settings

log = logging.getLogger(__name__)


class Client(ABC):
    """Typed, fail-soft API over the mount manager.

    Read operations never raise. Write operations (save_config, reset_config,
    save_module_rules, unload_hymofs) raise CapabilityAbsentError or RemoteFailureError.
    """

    backend: ClassVar[str]

    @abstractmethod
    async def load_config(self) -> AppConfig: ...

    @abstractmethod
    async def save_config(self, config: AppConfig) -> None: ...

    @abstractmethod
    async def reset_config(self) -> None: ...

    @abstractmethod
    async def scan_modules(self) -> list[Module]: ...

    @abstractmethod
    async def save_module_rules(self, module_id: str, rules: ModuleRules) -> None: ...

    @abstractmethod
    async def get_storage_usage(self) -> StorageStatus: ...

    @abstractmethod
    async def get_system_info(self) -> SystemInfo: ...

    @abstractmethod
    async def get_device_status(self) -> DeviceInfo: ...

    @abstractmethod
    async def get_version(self) -> str: ...

    @abstractmethod
    async def read_logs(self, path: str | None = None) -> str: ...

    @abstractmethod
    async def fetch_system_color(self) -> str | None: ...

    @abstractmethod
    async def open_link(self, url: str) -> None: ...

    @abstractmethod
    async def reboot(self) -> None: ...

    @abstractmethod
    async def unload_hymofs(self) -> None: ...


class RealClient(Client):
    """Client backed by the execution capability (which may be absent)."""

    backend = "real"

    def __init__(self, executor: Executor | None, settings: Settings | None = None) -> None:
        self.executor = executor
        self.settings = settings or Settings()
        self.commands = CommandSet.from_settings(self.settings)
        self.config = ConfigService(executor, self.commands)
        self.modules = ModuleService(executor, self.commands)
        self.status = StatusAggregator(executor, self.commands)

    async def load_config(self) -> AppConfig:
        return await self.config.load()

    async def save_config(self, config: AppConfig) -> None:
        await self.config.save(config)

    async def reset_config(self) -> None:
        await self.config.reset()

    async def scan_modules(self) -> list[Module]:
        return await self.modules.scan_modules()

    async def save_module_rules(self, module_id: str, rules: ModuleRules) -> None:
        await self.modules.save_module_rules(module_id, rules)

    async def get_storage_usage(self) -> StorageStatus:
        return await self.status.get_storage_usage()

    async def get_system_info(self) -> SystemInfo:
        return await self.status.get_system_info()

    async def get_device_status(self) -> DeviceInfo:
        return await self.status.get_device_status()

    async def get_version(self) -> str:
        return await self.status.get_version()

    async def read_logs(self, path: str | None = None) -> str:
        return await self.status.read_logs(path)

    async def fetch_system_color(self) -> str | None:
        return await resolve_accent_color(self.executor)

    async def open_link(self, url: str) -> None:
        """Open url on the device, or in a local browser without the capability."""
        if self.executor is None:
            webbrowser.open(url)
            return
        result = await self.executor.run(self.commands.open_link(url))
        if not result.ok:
            log.warning(f"Failed to open {url}: {result.stderr.strip()}")

    async def reboot(self) -> None:
        if self.executor is None:
            log.info("Reboot requested without execution capability; ignoring")
            return
        log.info("Rebooting device")
        result = await self.executor.run(self.commands.reboot())
        if not result.ok:
            log.warning(f"Reboot failed: {result.stderr.strip()}")

    async def unload_hymofs(self) -> None:
        """Remove the HymoFS kernel module.

        Raises:
            CapabilityAbsentError: If there is no execution capability
            RemoteFailureError: If rmmod exits non-zero
        """
        await run_write(self.executor, self.commands.unload_hymofs(), "unload HymoFS")
        log.info("HymoFS unloaded")
