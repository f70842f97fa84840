"""
help_screen.py
--------------
Static list of control descriptions. Fire returns to the caller.
"""

from invaders.scenes.base_scene import BaseScene


class HelpScreen(BaseScene):

    def __init__(self, game, title, lines, on_back=None, footer="(Press space to return)"):
        super().__init__(game)
        self.title = title
        self.lines = list(lines)
        self.on_back = on_back
        self.footer = footer

    def step(self, dt, keys):
        if keys["fire"] and self.on_back:
            self.on_back()

    def render(self, surface):
        self._clear(surface)
        center_x = self.game.width / 2

        surface.set_text_align("center")
        surface.set_fill_style("white")

        surface.set_font(24, bold=True)
        surface.fill_text(self.title, center_x, 80)

        surface.set_font(16)
        y = 120
        for line in self.lines:
            surface.fill_text(line, center_x, y)
            y += 30

        surface.set_font(14)
        surface.fill_text(self.footer, center_x, self.game.height - 60)
