"""Extractors for tags in buffer content"""

from .tag_scanner import TagScanner

__all__ = ['TagScanner']
