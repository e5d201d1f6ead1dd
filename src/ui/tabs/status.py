"""Status tab composition and text formatting."""

from __future__ import annotations

from textual.app import ComposeResult
from textual.containers import Horizontal, VerticalScroll
from textual.widgets import Button, Static

from model import DeviceInfo, StorageStatus, SystemInfo
from ui.widgets import InfoCard


def format_system_info(info: SystemInfo) -> str:
    """Format system info as aligned key/value lines."""
    lines = [
        f"Kernel:        {info.kernel}",
        f"SELinux:       {info.selinux}",
        f"Mount base:    {info.mount_base}",
        f"Active mounts: {', '.join(info.active_mounts) if info.active_mounts else 'none'}",
    ]
    if info.abi:
        lines.append(f"ABI:           {info.abi}")
    if info.zygisksu_enforce is not None:
        lines.append(f"Zygisk enforce: {'on' if info.zygisksu_enforce == '1' else 'off'}")
    if info.tmpfs_xattr_supported is not None:
        lines.append(f"tmpfs xattr:   {'supported' if info.tmpfs_xattr_supported else 'unsupported'}")
    if info.supported_overlay_modes:
        lines.append(f"Overlay modes: {', '.join(info.supported_overlay_modes)}")
    return "\n".join(lines)


def format_hymofs(info: SystemInfo) -> str:
    """Format the HymoFS state nested in system info."""
    state = info.hymofs_state
    if state is None:
        return "HymoFS state not reported"
    lines = [
        f"Loaded:   {'yes' if state.loaded else 'no'}",
        f"Version:  {state.version}",
        f"Features: {', '.join(state.active_features) if state.active_features else 'none'}",
    ]
    if state.error_msg:
        lines.append(f"Error:    {state.error_msg}")
    return "\n".join(lines)


def format_storage(status: StorageStatus) -> str:
    if status.type is None:
        detail = f" ({status.error})" if status.error else ""
        return f"Storage: unavailable{detail}"
    return f"Storage: {status.type}"


def format_device(device: DeviceInfo) -> str:
    return "\n".join([
        f"Model:   {device.model}",
        f"Android: {device.android}",
        f"Kernel:  {device.kernel}",
        f"SELinux: {device.selinux}",
    ])


def compose_status_tab() -> ComposeResult:
    """Compose the status tab content.

    Yields:
        Textual widgets for the status tab
    """
    with VerticalScroll(id="status-tab-content"):
        with Horizontal(classes="status-actions"):
            yield Button("Refresh", id="refresh-status-btn", variant="primary")
            yield Static("", id="accent-swatch")
            yield Static("", id="version-label", markup=False)
            yield Button("Reboot", id="reboot-btn", variant="error")
        yield InfoCard("Device", "device-info")
        yield InfoCard("System", "system-info")
        yield InfoCard("Storage", "storage-info")
        yield InfoCard("HymoFS", "hymofs-info")
        yield Button("Unload HymoFS", id="unload-hymofs-btn", variant="warning")
