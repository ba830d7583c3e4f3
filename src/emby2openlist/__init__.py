"""emby2openlist - Emby media paths to Openlist storage paths."""

__version__ = "0.1.0"
