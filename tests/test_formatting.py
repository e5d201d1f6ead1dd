"""Tests for status tab text formatting."""

from controller import summarize_rules
from model import DeviceInfo, HymoFSState, Module, ModuleRules, MountMode, StorageStatus, SystemInfo
from ui.tabs import format_device, format_hymofs, format_storage, format_system_info


class TestFormatSystemInfo:
    def test_sentinels(self):
        text = format_system_info(SystemInfo())
        assert "Kernel:        -" in text
        assert "Active mounts: none" in text
        assert "ABI" not in text

    def test_optional_fields(self):
        info = SystemInfo(
            active_mounts=["system", "vendor"],
            zygisksu_enforce="1",
            tmpfs_xattr_supported=False,
            abi="arm64-v8a",
            supported_overlay_modes=["tmpfs", "ext4"],
        )
        text = format_system_info(info)
        assert "system, vendor" in text
        assert "Zygisk enforce: on" in text
        assert "unsupported" in text
        assert "arm64-v8a" in text
        assert "tmpfs, ext4" in text


class TestFormatHymofs:
    def test_missing(self):
        assert format_hymofs(SystemInfo()) == "HymoFS state not reported"

    def test_loaded(self):
        info = SystemInfo(hymofs_state=HymoFSState(True, 12, ["debug"], "mismatch"))
        text = format_hymofs(info)
        assert "Loaded:   yes" in text
        assert "Version:  12" in text
        assert "debug" in text
        assert "mismatch" in text


class TestFormatStorage:
    def test_known(self):
        assert format_storage(StorageStatus(type="erofs")) == "Storage: erofs"

    def test_unavailable_with_error(self):
        text = format_storage(StorageStatus(type=None, error="Permission denied"))
        assert text == "Storage: unavailable (Permission denied)"


class TestFormatDevice:
    def test_fallbacks(self):
        text = format_device(DeviceInfo())
        assert "Model:   Device" in text
        assert "Android: 14" in text


class TestSummarizeRules:
    def test_default_only(self):
        assert summarize_rules(Module(id="m")) == "overlay"

    def test_with_paths(self):
        rules = ModuleRules(MountMode.MAGIC, {"a": MountMode.IGNORE, "b": MountMode.OVERLAY})
        assert summarize_rules(Module(id="m", rules=rules)) == "magic +2"
