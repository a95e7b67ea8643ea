"""Exceptions raised by anytag"""


class UsageError(RuntimeError):
    """Programmer error: the helper was wired up in a way it cannot support"""
