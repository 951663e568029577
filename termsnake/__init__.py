# termsnake Source Package
"""
termsnake - Terminal snake game.

Modules:
- core: Abstract interfaces for games, renderers, and display screens
- game: Geometry, entities, and the snake game engine and renderer
- controls: Keyboard commands and the background input listener
- display: Screen backends (curses terminal, pygame window)
- utils: Configuration and logging
- game_loop: Driver loop tying input, engine, and renderer together
"""

__version__ = "1.0.0"
