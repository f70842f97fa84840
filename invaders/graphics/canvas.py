"""
canvas.py
---------
Drawing-surface adapter used by boards, screens and the sprite atlas.

The simulation only ever talks to the surface through these primitives:
- clear_rect(x, y, w, h)
- draw_image(image, sx, sy, sw, sh, dx, dy, dw, dh)
- fill_text(text, x, y)
- set_font / set_fill_style / set_text_align state setters

Text is positioned canvas-style: y is the baseline and x is interpreted
according to the current alignment.
"""

import pygame

from invaders.core.debug.debug_logger import DebugLogger


class Canvas:
    """Wraps a pygame.Surface behind canvas-like drawing calls."""

    _font_cache = {}

    def __init__(self, surface: pygame.Surface, background: pygame.Surface = None):
        """
        Args:
            surface: Target surface (usually the window)
            background: Surface blitted by clear_rect; black fill when None
        """
        self.surface = surface
        self.background = background

        self.font_size = 16
        self.font_family = "arial"
        self.font_bold = False
        self.fill_style = pygame.Color("white")
        self.text_align = "left"

    @property
    def width(self) -> int:
        return self.surface.get_width()

    @property
    def height(self) -> int:
        return self.surface.get_height()

    # ===========================================================
    # State Setters
    # ===========================================================

    def set_font(self, size: int, family: str = "arial", bold: bool = False):
        self.font_size = int(size)
        self.font_family = family
        self.font_bold = bold

    def set_fill_style(self, color):
        """Accepts a colour name, '#rrggbb' string or RGB(A) tuple."""
        self.fill_style = pygame.Color(color)

    def set_text_align(self, align: str):
        if align not in ("left", "center", "right"):
            raise ValueError(f"Unknown text alignment: {align}")
        self.text_align = align

    # ===========================================================
    # Primitives
    # ===========================================================

    def clear_rect(self, x, y, w, h):
        area = pygame.Rect(int(x), int(y), int(w), int(h))
        if self.background is not None:
            self.surface.blit(self.background, area.topleft, area)
        else:
            self.surface.fill((0, 0, 0), area)

    def draw_image(self, image, sx, sy, sw, sh, dx, dy, dw, dh):
        """Copy the (sx, sy, sw, sh) region of image to (dx, dy, dw, dh)."""
        src = pygame.Rect(int(sx), int(sy), int(sw), int(sh))
        if (dw, dh) == (sw, sh):
            self.surface.blit(image, (int(dx), int(dy)), src)
            return
        region = image.subsurface(src)
        scaled = pygame.transform.scale(region, (int(dw), int(dh)))
        self.surface.blit(scaled, (int(dx), int(dy)))

    def fill_text(self, text: str, x, y):
        font = self._get_font()
        rendered = font.render(text, True, self.fill_style)
        rect = rendered.get_rect()

        if self.text_align == "center":
            rect.centerx = int(x)
        elif self.text_align == "right":
            rect.right = int(x)
        else:
            rect.left = int(x)
        rect.top = int(y) - font.get_ascent()

        self.surface.blit(rendered, rect)

    # ===========================================================
    # Font Cache
    # ===========================================================

    def _get_font(self) -> pygame.font.Font:
        key = (self.font_family, self.font_size, self.font_bold)
        font = self._font_cache.get(key)
        if font is None:
            if not pygame.font.get_init():
                pygame.font.init()
            font = pygame.font.SysFont(self.font_family, self.font_size, bold=self.font_bold)
            self._font_cache[key] = font
            DebugLogger.trace(f"Cached font {key}", category="system")
        return font
