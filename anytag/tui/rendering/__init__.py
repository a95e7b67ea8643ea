"""Rendering utilities for TUI"""

from .colors import init_colors, ColorPairs
from .text_renderer import TextRenderer

__all__ = ['init_colors', 'ColorPairs', 'TextRenderer']
