"""Tests for init_client() binding and RealClient extras."""

from unittest.mock import patch

import pytest

from api import MockClient, RealClient, init_client
from api.executor import SubprocessExecutor
from errors import CapabilityAbsentError, RemoteFailureError
from settings import Settings

from conftest import FakeExecutor


class TestInitClient:
    """Test the one-time real/mock decision."""

    def test_dev_mode_binds_mock(self):
        client = init_client(Settings(dev_mode=True), executor=FakeExecutor())
        assert isinstance(client, MockClient)
        assert client.backend == "mock"

    def test_mock_latency_applied(self):
        client = init_client(Settings(dev_mode=True, mock_latency=0.0))
        assert client.latency == 0.0

    def test_explicit_executor_binds_real(self):
        executor = FakeExecutor()
        client = init_client(Settings(), executor=executor)
        assert isinstance(client, RealClient)
        assert client.backend == "real"
        assert client.executor is executor

    @patch("api.facade.detect_executor", return_value=None)
    def test_no_capability_binds_mock(self, mock_detect):
        client = init_client(Settings())
        assert isinstance(client, MockClient)
        mock_detect.assert_called_once()

    @patch("api.facade.detect_executor")
    def test_detected_capability_binds_real(self, mock_detect):
        mock_detect.return_value = SubprocessExecutor(["/system/bin/su", "-c"])
        client = init_client(Settings())
        assert isinstance(client, RealClient)

    @patch("api.facade.detect_executor")
    def test_dev_mode_skips_detection(self, mock_detect):
        init_client(Settings(dev_mode=True))
        mock_detect.assert_not_called()

    def test_settings_flow_into_commands(self):
        settings = Settings(binary="/opt/hm/hybrid-mount", state_file="/opt/hm/state.json")
        client = init_client(settings, executor=FakeExecutor())
        assert client.commands.show_config() == ["/opt/hm/hybrid-mount", "show-config"]
        assert client.commands.read_state() == ["cat", "/opt/hm/state.json"]
        assert client.commands.read_version() == ["grep", "^version=", "/opt/hm/module.prop"]


class TestOpenLinkAndReboot:
    """Test RealClient.open_link() and reboot()."""

    @pytest.mark.asyncio
    async def test_open_link_argv(self, client, executor):
        url = "https://example.com/?a=1&b=$(id)"
        executor.script(["am", "start"])
        await client.open_link(url)
        assert executor.calls[-1] == ["am", "start", "-a", "android.intent.action.VIEW", "-d", url]

    @pytest.mark.asyncio
    async def test_open_link_without_capability_uses_browser(self, offline_client):
        with patch("api.client.webbrowser.open") as mock_open:
            await offline_client.open_link("https://example.com")
        mock_open.assert_called_once_with("https://example.com")

    @pytest.mark.asyncio
    async def test_open_link_failure_is_soft(self, client, executor):
        executor.fail(["am", "start"], stderr="activity not found")
        await client.open_link("https://example.com")

    @pytest.mark.asyncio
    async def test_reboot(self, client, executor):
        executor.script(["reboot"])
        await client.reboot()
        assert executor.calls == [["reboot"]]

    @pytest.mark.asyncio
    async def test_reboot_without_capability_is_noop(self, offline_client):
        await offline_client.reboot()


class TestUnloadHymofs:
    """Test RealClient.unload_hymofs() (a write: failures raise)."""

    @pytest.mark.asyncio
    async def test_argv(self, client, executor):
        executor.script(["rmmod", "hymofs_lkm"])
        await client.unload_hymofs()
        assert executor.calls == [["rmmod", "hymofs_lkm"]]

    @pytest.mark.asyncio
    async def test_failure_raises(self, client, executor):
        executor.fail(["rmmod", "hymofs_lkm"], stderr="Module hymofs_lkm is in use")
        with pytest.raises(RemoteFailureError, match="in use"):
            await client.unload_hymofs()

    @pytest.mark.asyncio
    async def test_without_capability_raises(self, offline_client):
        with pytest.raises(CapabilityAbsentError, match="unload HymoFS"):
            await offline_client.unload_hymofs()
