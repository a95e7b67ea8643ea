"""TUI (Text User Interface) package for anytag"""

from .demo import run_demo, TagDemo

__all__ = ['run_demo', 'TagDemo']
