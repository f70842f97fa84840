"""
menu.py
-------
Vertical text menu with a wrapping selection cursor.

Navigation reads the held level of up/down, not key presses: holding a
direction moves the cursor once per call, every frame.
"""

from invaders.core.debug.debug_logger import DebugLogger


class Menu:
    FONT_FAMILY = "arial"
    TEXT_COLOR = "white"
    SELECTED_COLOR = (255, 255, 0)

    def __init__(self, title, items, y, size, game_width, game_height):
        """
        Args:
            title: Heading drawn at a quarter of the surface height
            items: Item labels, top to bottom
            y: Baseline the first item is offset from
            size: Selected item font size and line pitch
            game_width, game_height: Surface size
        """
        if not items:
            raise ValueError("Menu needs at least one item")

        self.title = title
        self.items = list(items)
        self.y = y
        self.size = size
        self.game_width = game_width
        self.game_height = game_height
        self.selected_index = 0

    @property
    def selected_item(self) -> str:
        return self.items[self.selected_index]

    def input(self, dt, keys):
        count = len(self.items)
        previous = self.selected_index

        if keys["up"]:
            self.selected_index = (self.selected_index + count - 1) % count
        if keys["down"]:
            self.selected_index = (self.selected_index + 1) % count

        if self.selected_index != previous:
            DebugLogger.trace(f"Menu selection -> {self.selected_item}", category="scene")

    def render(self, surface):
        surface.set_text_align("center")
        center_x = self.game_width / 2

        if self.title:
            surface.set_font(int(self.size * 1.3), self.FONT_FAMILY)
            surface.set_fill_style(self.TEXT_COLOR)
            surface.fill_text(self.title, center_x, self.game_height / 4)

        y = self.y
        for i, item in enumerate(self.items):
            if i == self.selected_index:
                surface.set_fill_style(self.SELECTED_COLOR)
                size = self.size
            else:
                surface.set_fill_style(self.TEXT_COLOR)
                size = int(self.size * 0.8)

            surface.set_font(size, self.FONT_FAMILY)
            y += self.size
            surface.fill_text(item, center_x, y)

        surface.set_fill_style(self.TEXT_COLOR)
