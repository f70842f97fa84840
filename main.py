"""
main.py
-------
Launcher for running the game from a source checkout.
"""

from invaders.main import main


if __name__ == "__main__":
    raise SystemExit(main())
