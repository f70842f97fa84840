"""
invaders
--------
Space Invaders arcade engine built on pygame.
"""

__version__ = "1.0.0"
