"""System accent color lookup across theming subsystems.

Sources are tried in order and the first one yielding a color wins. Each
source is a command plus an extractor over that command's output, so every
format can be tested on its own.
"""

from __future__ import annotations

import logging
import re
from typing import Callable, NamedTuple, Sequence

from api.executor import Executor, read_output
from errors import ClientError

log = logging.getLogger(__name__)

# Known overlay packages and the accent each one applies
OVERLAY_COLOR_MAP: dict[str, str] = {
    "com.android.theme.color.cinnamon": "#9F6047",
    "com.android.theme.color.black": "#3C3F41",
    "com.android.theme.color.green": "#3DDC84",
    "com.android.theme.color.ocean": "#009688",
    "com.android.theme.color.space": "#475975",
    "com.android.theme.color.orchid": "#DA70D6",
    "com.android.theme.color.purple": "#9C27B0",
    "org.lineageos.overlay.accent.blue": "#4285F4",
    "org.lineageos.overlay.accent.cyan": "#00BCD4",
    "org.lineageos.overlay.accent.green": "#4CAF50",
    "org.lineageos.overlay.accent.orange": "#FF9800",
    "org.lineageos.overlay.accent.pink": "#E91E63",
    "org.lineageos.overlay.accent.purple": "#9C27B0",
    "org.lineageos.overlay.accent.red": "#F44336",
    "org.lineageos.overlay.accent.yellow": "#FFEB3B",
}

_SETTINGS_RE = re.compile(
    r"""["']?(?:android\.theme\.customization\.system_palette|source_color)["']?"""
    r"""\s*:\s*["']?#?([0-9a-fA-F]{6,8})["']?""",
    re.IGNORECASE,
)
_WALLPAPER_RE = re.compile(r"mMainColor=0x([0-9a-fA-F]{8})", re.IGNORECASE)
_PROP_RE = re.compile(r"^#?([0-9a-fA-F]{6,8})$")


def normalize_hex(digits: str) -> str:
    """Return a #-prefixed color, dropping the alpha byte of 8-digit ARGB values."""
    if len(digits) == 8:
        digits = digits[2:]
    return f"#{digits}"


def extract_settings_color(output: str) -> str | None:
    """Palette or source color from theme_customization_overlay_packages JSON."""
    match = _SETTINGS_RE.search(output)
    return normalize_hex(match.group(1)) if match else None


def extract_wallpaper_color(output: str) -> str | None:
    """Primary wallpaper color (mMainColor=0xAARRGGBB) from dumpsys wallpaper."""
    match = _WALLPAPER_RE.search(output)
    return normalize_hex(match.group(1)) if match else None


def extract_overlay_color(output: str) -> str | None:
    """Literal color of the first enabled overlay package we know about."""
    for line in output.splitlines():
        if "[x]" not in line:
            continue
        for package, color in OVERLAY_COLOR_MAP.items():
            if package in line:
                return color
    return None


def extract_prop_color(output: str) -> str | None:
    """Bare or #-prefixed hex color from persist.sys.theme.color."""
    match = _PROP_RE.match(output.strip())
    return normalize_hex(match.group(1)) if match else None


class ColorSource(NamedTuple):
    """One step of the accent color search."""

    name: str
    argv: tuple[str, ...]
    extract: Callable[[str], str | None]


COLOR_SOURCES: tuple[ColorSource, ...] = (
    ColorSource(
        "settings",
        ("settings", "get", "secure", "theme_customization_overlay_packages"),
        extract_settings_color,
    ),
    ColorSource("wallpaper", ("dumpsys", "wallpaper"), extract_wallpaper_color),
    ColorSource("overlay", ("cmd", "overlay", "list", "--user", "current"), extract_overlay_color),
    ColorSource("property", ("getprop", "persist.sys.theme.color"), extract_prop_color),
)


async def resolve_accent_color(
    executor: Executor | None,
    sources: Sequence[ColorSource] = COLOR_SOURCES,
) -> str | None:
    """Return the first accent color found, or None if no source yields one.

    None means "no accent available"; it is never an error.
    """
    if executor is None:
        return None

    for source in sources:
        try:
            output = await read_output(executor, source.argv)
        except (ClientError, OSError) as e:
            log.debug(f"Accent source {source.name} unavailable: {e}")
            continue
        color = source.extract(output)
        if color:
            log.debug(f"Accent color {color} from {source.name}")
            return color
    return None
