"""Exceptions raised across scriptkit, each derived from the builtin it refines."""


class TypeMismatchError(TypeError):
    """A value's classified tag (or class) disagrees with the expected one."""


class IndexOutOfRangeError(IndexError):
    """A position is outside [1, len] or a range is malformed (i > j)."""


class PatternError(ValueError):
    """A pattern operation could not make progress."""
