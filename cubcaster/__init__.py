"""Grid raycaster with a minimap and a pygame window, plus text, byte, output and line-reading helpers."""

__version__ = "0.1.0"