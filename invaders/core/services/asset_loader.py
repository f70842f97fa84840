"""
asset_loader.py
---------------
Startup asset loading: sprite sheet, sprite metadata and sound effects.

Everything listed in assets.json is loaded before the first frame. Any
failure aborts the whole load with AssetLoadError.
"""

import sys
from pathlib import Path

from invaders.core.debug.debug_logger import DebugLogger
from invaders.core.errors import AssetLoadError
from invaders.core.services.config_manager import load_config


DEFAULT_ASSET_TABLE = {
    "sprite_sheet": "images/sprites.bmp",
    "sprites": "sprites.json",
    "sounds": {
        "fire": "audio/fire.wav",
        "die": "audio/explosion.wav",
    },
}


def find_assets_root() -> Path:
    """
    Return the `assets` directory.

    Checks a PyInstaller bundle first, then walks up from this file, which
    covers both the source tree and an installed package.

    Raises:
        AssetLoadError: No assets directory found
    """
    bundle = getattr(sys, "_MEIPASS", None)
    if bundle:
        candidate = Path(bundle) / "assets"
        if candidate.is_dir():
            return candidate

    here = Path(__file__).resolve()
    for parent in here.parents:
        candidate = parent / "assets"
        if candidate.is_dir():
            return candidate

    raise AssetLoadError("assets", "assets directory not found")


def load_assets(atlas, audio, table=None, root=None):
    """
    Load the sprite atlas and the sound table.

    Args:
        atlas: SpriteAtlas to fill
        audio: SoundManager to fill
        table: Asset table (defaults to assets.json)
        root: Assets directory (defaults to find_assets_root())

    Raises:
        AssetLoadError: Any sheet, metadata or sound file failed
    """
    DebugLogger.section("Loading Assets")

    if table is None:
        table = load_config("assets.json", DEFAULT_ASSET_TABLE)
    root = Path(root) if root is not None else find_assets_root()

    metadata = load_config(table["sprites"], strict=True)
    atlas.load(str(root / table["sprite_sheet"]), metadata)

    sounds = {name: str(root / path) for name, path in table["sounds"].items()}
    audio.load(sounds)

    DebugLogger.system("All assets loaded", category="loading")
