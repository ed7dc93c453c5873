"""Two-dimensional gravitational planet simulator with an editor, an animation view and `.sss` file storage."""

__version__ = "0.1.0"