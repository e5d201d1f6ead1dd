"""Tests for the accent color resolver."""

import pytest

from api.accent import (
    COLOR_SOURCES,
    OVERLAY_COLOR_MAP,
    extract_overlay_color,
    extract_prop_color,
    extract_settings_color,
    extract_wallpaper_color,
    normalize_hex,
    resolve_accent_color,
)

SETTINGS, WALLPAPER, OVERLAY, PROPERTY = (source.argv for source in COLOR_SOURCES)

OVERLAY_LIST = """\
com.android.systemui
[ ] com.android.theme.color.cinnamon
[x] com.android.theme.color.ocean
[x] org.lineageos.overlay.accent.red
"""


class TestNormalizeHex:
    def test_six_digits_kept(self):
        assert normalize_hex("4285F4") == "#4285F4"

    def test_alpha_byte_dropped(self):
        assert normalize_hex("FF4285F4") == "#4285F4"


class TestExtractors:
    """Each source format on its own."""

    def test_settings_system_palette(self):
        output = '{"android.theme.customization.system_palette":"FF6750A4","android.theme.customization.theme_style":"TONAL_SPOT"}'
        assert extract_settings_color(output) == "#6750A4"

    def test_settings_source_color_with_hash(self):
        output = "{'android.theme.customization.source_color': '#1B6EF3'}"
        assert extract_settings_color(output) == "#1B6EF3"

    def test_settings_null(self):
        assert extract_settings_color("null") is None

    def test_wallpaper_main_color(self):
        output = "  mColors: WallpaperColors(mMainColor=0xff3ddc84 mSecondaryColor=0xff000000)"
        assert extract_wallpaper_color(output) == "#3ddc84"

    def test_wallpaper_needs_eight_digits(self):
        assert extract_wallpaper_color("mMainColor=0x3ddc84 ") is None

    def test_overlay_first_enabled_known_package(self):
        assert extract_overlay_color(OVERLAY_LIST) == OVERLAY_COLOR_MAP["com.android.theme.color.ocean"]

    def test_overlay_disabled_ignored(self):
        assert extract_overlay_color("[ ] com.android.theme.color.cinnamon\n") is None

    def test_prop_bare(self):
        assert extract_prop_color("ff112233\n") == "#112233"

    def test_prop_hash_prefixed(self):
        assert extract_prop_color("#abcdef") == "#abcdef"

    def test_prop_rejects_names(self):
        assert extract_prop_color("blue") is None


class TestResolveAccentColor:
    """Test ordered fallback search."""

    @pytest.mark.asyncio
    async def test_first_source_wins(self, executor):
        executor.script(SETTINGS, '{"android.theme.customization.system_palette":"6750A4"}')
        executor.script(PROPERTY, "#112233")

        assert await resolve_accent_color(executor) == "#6750A4"
        assert executor.calls == [list(SETTINGS)]

    @pytest.mark.asyncio
    async def test_overlay_wins_when_earlier_sources_absent(self, executor):
        """Step 3 matches; step 4 is never consulted."""
        executor.fail(SETTINGS)
        executor.script(WALLPAPER, "no colors here")
        executor.script(OVERLAY, OVERLAY_LIST)
        executor.script(PROPERTY, "#112233")

        color = await resolve_accent_color(executor)

        assert color == OVERLAY_COLOR_MAP["com.android.theme.color.ocean"]
        assert not executor.was_called(PROPERTY)

    @pytest.mark.asyncio
    async def test_raising_source_skipped(self, executor):
        executor.raise_on(SETTINGS, OSError("settings: not found"))
        executor.script(WALLPAPER, "mMainColor=0xff4285f4")
        assert await resolve_accent_color(executor) == "#4285f4"

    @pytest.mark.asyncio
    async def test_all_sources_fail(self, executor):
        assert await resolve_accent_color(executor) is None
        assert len(executor.calls) == len(COLOR_SOURCES)

    @pytest.mark.asyncio
    async def test_no_capability(self):
        assert await resolve_accent_color(None) is None

    @pytest.mark.asyncio
    async def test_client_delegates(self, client, executor):
        executor.script(PROPERTY, "FF00BCD4")
        assert await client.fetch_system_color() == "#00BCD4"

    @pytest.mark.asyncio
    async def test_offline_client(self, offline_client):
        assert await offline_client.fetch_system_color() is None
