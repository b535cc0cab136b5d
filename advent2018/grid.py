"""Helpers for working with positions on a grid of non-negative coordinates."""

_OFFSETS = ((0, 1), (0, -1), (1, 0), (-1, 0))


def nsew(x, y):
    """Return the four orthogonal neighbours of ``(x, y)``.

    Coordinates never drop below zero: a step off the low edge stays on it.
    """
    return [(max(x + dx, 0), max(y + dy, 0)) for dx, dy in _OFFSETS]