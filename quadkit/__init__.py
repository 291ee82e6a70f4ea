"""Immediate-mode UI building blocks: layout, text editing, input, styles and mesh batching."""

__version__ = "0.1.0"