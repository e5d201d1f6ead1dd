"""Tests for module scan and rule persistence."""

import pytest

from api.codec import decode_payload
from errors import CapabilityAbsentError, RemoteFailureError
from model import ModuleRules, MountMode

from conftest import TEST_BINARY

MODULES_OUTPUT = [
    {"id": "fonts", "name": "Fonts", "mode": "magic", "is_mounted": True,
     "rules": {"default_mode": "magic", "paths": {"system/fonts": "overlay"}}},
    {"id": "ui", "name": "UI Overlay", "mode": "auto"},
]


class TestScanModules:
    """Test scan_modules() parsing and fail-soft behavior."""

    @pytest.mark.asyncio
    async def test_parses_entries(self, client, executor):
        executor.script_json([TEST_BINARY, "modules"], MODULES_OUTPUT)
        modules = await client.scan_modules()
        assert [m.id for m in modules] == ["fonts", "ui"]
        assert modules[0].rules.paths == {"system/fonts": MountMode.OVERLAY}
        assert modules[1].rules.default_mode is MountMode.OVERLAY

    @pytest.mark.asyncio
    async def test_duplicate_ids_first_wins(self, client, executor):
        executor.script_json([TEST_BINARY, "modules"], [
            {"id": "dup", "name": "first"},
            {"id": "dup", "name": "second"},
        ])
        modules = await client.scan_modules()
        assert len(modules) == 1
        assert modules[0].name == "first"

    @pytest.mark.asyncio
    async def test_failure_returns_empty(self, client, executor):
        executor.fail([TEST_BINARY, "modules"])
        assert await client.scan_modules() == []

    @pytest.mark.asyncio
    async def test_malformed_entry_skipped_alone(self, client, executor):
        executor.script_json([TEST_BINARY, "modules"], [
            {"id": "ok"},
            {"id": "bad", "rules": {"default_mode": "x"}},
            "not an object",
            {"id": "also_ok"},
        ])
        modules = await client.scan_modules()
        assert [m.id for m in modules] == ["ok", "also_ok"]

    @pytest.mark.asyncio
    async def test_non_array_output_returns_empty(self, client, executor):
        executor.script_json([TEST_BINARY, "modules"], {"id": "ok"})
        assert await client.scan_modules() == []

    @pytest.mark.asyncio
    async def test_no_capability_returns_empty(self, offline_client):
        assert await offline_client.scan_modules() == []


class TestSaveModuleRules:
    """Test save_module_rules() command shape and errors."""

    @pytest.mark.asyncio
    async def test_argv_shape(self, client, executor):
        executor.script([TEST_BINARY, "save-module-rules"])
        rules = ModuleRules(MountMode.MAGIC, {"system/app/Foo": MountMode.IGNORE})

        await client.save_module_rules("fonts", rules)

        argv = executor.calls[-1]
        assert argv[:5] == [TEST_BINARY, "save-module-rules", "--module", "fonts", "--payload"]
        assert decode_payload(argv[5]) == {"default_mode": "magic", "paths": {"system/app/Foo": "ignore"}}

    @pytest.mark.asyncio
    async def test_module_id_is_single_argument(self, client, executor):
        """Shell metacharacters in the id stay inside one argv element."""
        executor.script([TEST_BINARY, "save-module-rules"])
        hostile = "x'; reboot; echo '"

        await client.save_module_rules(hostile, ModuleRules())

        argv = executor.calls[-1]
        assert argv[3] == hostile
        assert len(argv) == 6

    @pytest.mark.asyncio
    async def test_disk_full_raises_with_stderr(self, client, executor):
        executor.fail([TEST_BINARY, "save-module-rules"], stderr="disk full")
        with pytest.raises(RemoteFailureError) as exc_info:
            await client.save_module_rules("fonts", ModuleRules())
        assert "disk full" in str(exc_info.value)
        assert exc_info.value.stderr == "disk full"

    @pytest.mark.asyncio
    async def test_no_capability_raises(self, offline_client):
        with pytest.raises(CapabilityAbsentError):
            await offline_client.save_module_rules("fonts", ModuleRules())
