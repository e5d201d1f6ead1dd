"""Compiled-in constants for hmui."""

from __future__ import annotations

APP_VERSION = "1.2.0"

# Privileged binary and the files it maintains on the device
DEFAULT_BINARY = "/data/adb/modules/hybrid_mount/hybrid-mount"
DEFAULT_STATE_FILE = "/data/adb/meta-hybrid/run/daemon_state.json"
DEFAULT_LOGFILE = "/data/adb/meta-hybrid/daemon.log"

# Compiled-in configuration record (wire form, as emitted by show-config)
DEFAULT_CONFIG: dict = {
    "moduledir": "/data/adb/modules",
    "mountsource": "KSU",
    "partitions": [],
    "overlay_mode": "tmpfs",
    "disable_umount": False,
    "allow_umount_coexistence": False,
    "logfile": DEFAULT_LOGFILE,
    "hymofs_debug": False,
    "hymofs_stealth": False,
}

OVERLAY_MODES = ("tmpfs", "ext4", "erofs")
STORAGE_TYPES = ("tmpfs", "ext4", "erofs", "unknown")

# Literal fallbacks for device status queries
FALLBACK_MODEL = "Device"
FALLBACK_ANDROID = "14"
FALLBACK_KERNEL = "Unknown"
FALLBACK_SELINUX = "Enforcing"

# Sentinel for system info fields that could not be read
UNKNOWN_FIELD = "-"

# Mock latencies in seconds (multiplied by Settings.mock_latency)
MOCK_DELAYS = {
    "load_config": 0.3,
    "save_config": 0.5,
    "reset_config": 0.5,
    "scan_modules": 0.6,
    "save_module_rules": 0.4,
    "get_device_status": 0.3,
    "get_version": 0.1,
    "get_storage_usage": 0.3,
    "get_system_info": 0.3,
    "read_logs": 0.2,
    "fetch_system_color": 0.2,
    "reboot": 0.5,
    "unload_hymofs": 0.5,
}

# Kernel module name of the HymoFS LKM (loaded from <kmi>_hymofs_lkm.ko)
HYMOFS_LKM_NAME = "hymofs_lkm"
