"""
errors.py
---------
Exception taxonomy for the engine.

SpriteNotFoundError and AssetLoadError are configuration/startup failures
surfaced to the caller. Unknown sound names and double removals are
recovered where they happen and never raise.
"""


class InvadersError(Exception):
    """Base class for engine errors."""


class SpriteNotFoundError(InvadersError, KeyError):
    """Requested sprite name is not in the atlas."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(name)

    def __str__(self):
        return f"Sprite not found: {self.name}"


class AssetLoadError(InvadersError):
    """An image, sound or required config file failed to load."""

    def __init__(self, path: str, reason: str = ""):
        self.path = path
        self.reason = reason
        message = f"Failed to load asset: {path}"
        if reason:
            message = f"{message} ({reason})"
        super().__init__(message)
