"""Status aggregation from independent system queries and the daemon state file.

Every sub-query is isolated: one failing command leaves only its own fields
at their defaults and never prevents the others from contributing.
"""

from __future__ import annotations

import logging
import re
from typing import Any

from api.commands import CommandSet
from api.executor import Executor, read_output
from constants import APP_VERSION, DEFAULT_LOGFILE, STORAGE_TYPES
from errors import ClientError
from model import DeviceInfo, HymoFSState, StorageStatus, SystemInfo
from model.schema import parse_json_object, read_bool, read_object, read_str, read_str_list

log = logging.getLogger(__name__)

_VERSION_RE = re.compile(r"^version=(.+)$", re.MULTILINE)

# Exceptions a single sub-query may end with; all of them are absorbed
QUERY_ERRORS = (ClientError, OSError)


def parse_system_facts(output: str, info: SystemInfo) -> None:
    """Apply KERNEL:/SELINUX: tagged lines to info."""
    for line in output.splitlines():
        if line.startswith("KERNEL:"):
            info.kernel = line[len("KERNEL:"):].strip()
        elif line.startswith("SELINUX:"):
            info.selinux = line[len("SELINUX:"):].strip()


def apply_daemon_state(state: dict[str, Any], info: SystemInfo) -> None:
    """Apply daemon state fields to info.

    All fields are validated before any is assigned, so a malformed state
    leaves info untouched.

    Raises:
        MalformedOutputError: If a present field has the wrong type
    """
    mount_point = read_str(state, "mount_point", None)
    active_mounts = read_str_list(state, "active_mounts", [])
    enforce = read_bool(state, "zygisksu_enforce", None)
    xattr = read_bool(state, "tmpfs_xattr_supported", None)
    abi = read_str(state, "abi", None)
    overlay_modes = read_str_list(state, "supported_overlay_modes", None)
    hymofs_data = read_object(state, "hymofs_state", None)
    hymofs = HymoFSState.from_dict(hymofs_data) if hymofs_data is not None else None

    info.mount_base = mount_point or "Unknown"
    info.active_mounts = active_mounts
    if enforce is not None:
        info.zygisksu_enforce = "1" if enforce else "0"
    if xattr is not None:
        info.tmpfs_xattr_supported = xattr
    if abi:
        info.abi = abi
    if overlay_modes is not None:
        info.supported_overlay_modes = overlay_modes
    if hymofs is not None:
        info.hymofs_state = hymofs


class StatusAggregator:
    """Builds SystemInfo, StorageStatus and DeviceInfo records."""

    def __init__(self, executor: Executor | None, commands: CommandSet) -> None:
        self.executor = executor
        self.commands = commands

    async def _read_state(self) -> dict[str, Any]:
        output = await read_output(self.executor, self.commands.read_state())
        return parse_json_object(output)

    async def _query(self, argv: list[str]) -> str | None:
        """Run one read query, returning stripped stdout or None on failure."""
        try:
            return (await read_output(self.executor, argv)).strip()
        except QUERY_ERRORS as e:
            log.debug(f"Query {argv} failed: {e}")
            return None

    async def get_system_info(self) -> SystemInfo:
        info = SystemInfo()

        facts = await self._query(self.commands.system_facts())
        if facts is not None:
            parse_system_facts(facts, info)

        try:
            apply_daemon_state(await self._read_state(), info)
        except QUERY_ERRORS as e:
            log.debug(f"Daemon state unavailable: {e}")

        return info

    async def get_storage_usage(self) -> StorageStatus:
        try:
            state = await self._read_state()
            mode = read_str(state, "storage_mode", None)
        except QUERY_ERRORS as e:
            log.debug(f"Storage status unavailable: {e}")
            return StorageStatus(type=None, error=str(e))

        if mode not in STORAGE_TYPES:
            if mode:
                log.warning(f"Unrecognised storage mode: {mode}")
            mode = "unknown"
        return StorageStatus(type=mode)

    async def get_device_status(self) -> DeviceInfo:
        device = DeviceInfo()

        model = await self._query(self.commands.getprop("ro.product.model"))
        if model:
            device.model = model

        release = await self._query(self.commands.getprop("ro.build.version.release"))
        sdk = await self._query(self.commands.getprop("ro.build.version.sdk"))
        if release:
            device.android = f"{release} (API {sdk})" if sdk else release

        kernel = await self._query(self.commands.kernel_release())
        if kernel:
            device.kernel = kernel

        return device

    async def get_version(self) -> str:
        """Version from module.prop next to the binary, else the compiled-in version."""
        output = await self._query(self.commands.read_version())
        if output:
            match = _VERSION_RE.search(output)
            if match:
                return match.group(1).strip()
        return APP_VERSION

    async def read_logs(self, path: str | None = None) -> str:
        """Contents of the daemon log, or "" when it cannot be read."""
        try:
            return await read_output(self.executor, self.commands.read_file(path or DEFAULT_LOGFILE))
        except QUERY_ERRORS as e:
            log.debug(f"Log read failed: {e}")
            return ""
