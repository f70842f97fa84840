"""
sound_manager.py
----------------
Sound effect loading and playback over a fixed pool of mixer channels.

- load(table) is all-or-nothing: if any file fails nothing is registered
  and AssetLoadError is raised.
- play(name) takes the first channel whose previous sound has finished.
  When every channel is busy the request is dropped, never queued.
- Unknown sound names only produce a warning.
"""

import time

import pygame

from invaders.core.debug.debug_logger import DebugLogger
from invaders.core.errors import AssetLoadError
from invaders.core.runtime.game_settings import AudioSettings


class AudioChannel:
    """A mixer channel plus the time (ms) its current sound finishes."""

    __slots__ = ("channel", "finished")

    def __init__(self, channel):
        self.channel = channel
        self.finished = -1.0


class SoundManager:
    def __init__(self, channel_count: int = AudioSettings.CHANNELS):
        self.channel_count = channel_count
        self.sounds = {}
        self.channels = []

    @staticmethod
    def _now_ms() -> float:
        return time.perf_counter() * 1000.0

    # ===========================================================
    # Loading
    # ===========================================================

    def _init_mixer(self):
        try:
            if not pygame.mixer.get_init():
                pygame.mixer.init()
            pygame.mixer.set_num_channels(self.channel_count)
        except pygame.error as e:
            raise AssetLoadError("mixer", str(e)) from e
        self.channels = [AudioChannel(pygame.mixer.Channel(i)) for i in range(self.channel_count)]

    def load(self, files: dict):
        """
        Load every sound in a name -> path table.

        Raises:
            AssetLoadError: Mixer unavailable or any file failed to load
        """
        if not self.channels:
            self._init_mixer()

        loaded = {}
        for name, path in files.items():
            try:
                loaded[name] = pygame.mixer.Sound(path)
            except (pygame.error, FileNotFoundError) as e:
                DebugLogger.fail(f"Failed to load audio '{name}' from {path}", category="audio")
                raise AssetLoadError(path, str(e)) from e

        self.sounds.update(loaded)
        DebugLogger.init_entry("SoundManager")
        DebugLogger.init_sub(f"{len(loaded)} sounds, {len(self.channels)} channels")

    # ===========================================================
    # Playback
    # ===========================================================

    def play(self, name: str):
        sound = self.sounds.get(name)
        if sound is None:
            DebugLogger.warn(f"Sound not found: {name}", category="audio")
            return

        now = self._now_ms()
        for slot in self.channels:
            if slot.finished < now:
                slot.finished = now + sound.get_length() * 1000.0
                slot.channel.play(sound)
                return

        DebugLogger.trace(f"All channels busy, dropped '{name}'", category="audio")
