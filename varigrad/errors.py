# ╔══════════════════════════════════════════════════════════════════════╗
# ║  Varigrad — Reverse-Mode Autodiff Core                               ║
# ║  Copyright © 2026 Pictofeed, LLC. All rights reserved.               ║
# ╚══════════════════════════════════════════════════════════════════════╝
"""Exceptions raised by graph construction and the backward engine.

Every error here is a programming-contract violation: a malformed
:class:`~varigrad.function.Function` or a corrupted graph.  They are
raised immediately and never retried.
"""
from __future__ import annotations


class VarigradError(RuntimeError):
    """Base class for all autodiff failures."""


class MissingSeedError(VarigradError):
    """The root has no gradient and its data cannot be seeded with ones."""


class ArityMismatchError(VarigradError):
    """A function received, or returned, the wrong number of values."""


class ShapeMismatchError(VarigradError):
    """A gradient's shape disagrees with the data it belongs to."""

    def __init__(self, message: str, expected: tuple, actual: tuple):
        super().__init__(f"{message}: expected shape {expected}, got {actual}")
        self.expected = expected
        self.actual = actual


class CycleDetectedError(VarigradError):
    """Generation bookkeeping is broken; traversal would not terminate."""


__all__ = [
    'VarigradError',
    'MissingSeedError',
    'ArityMismatchError',
    'ShapeMismatchError',
    'CycleDetectedError',
]
