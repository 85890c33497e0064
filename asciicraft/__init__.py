"""A block world rendered as ASCII art in the terminal by ray casting."""

__version__ = "0.1.0"
__all__ = ["vector", "world", "render", "terminal", "game"]