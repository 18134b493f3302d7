# ╔══════════════════════════════════════════════════════════════════════╗
# ║  Varigrad — Reverse-Mode Autodiff Core                               ║
# ║  Copyright © 2026 Pictofeed, LLC. All rights reserved.               ║
# ╚══════════════════════════════════════════════════════════════════════╝
"""Differentiable function contract and graph construction.

A :class:`Function` is a pure ``forward`` / ``backward`` pair.  Calling a
Function on Variables evaluates ``forward`` and, when graph recording is
enabled, links the output to a :class:`Calculation` that remembers the
inputs so the backward engine can replay it.
"""
from __future__ import annotations

import numpy as np
from typing import TYPE_CHECKING, Sequence

from .config import Config
from .errors import ArityMismatchError

if TYPE_CHECKING:
    from .variable import Variable


# ──────────────────────── Value coercion ──────────────────────────────

def as_array(x) -> np.ndarray:
    """Coerce NumPy scalars (e.g. the result of ``np.exp`` on a 0-d array)
    back into arrays."""
    if isinstance(x, np.ndarray):
        return x
    return np.asarray(x)


def as_variable(obj) -> 'Variable':
    from .variable import Variable
    if isinstance(obj, Variable):
        return obj
    return Variable(obj)


def sum_to(x: np.ndarray, shape: tuple) -> np.ndarray:
    """Sum out dimensions that were broadcast so *x* has *shape*."""
    if x.shape == shape:
        return x
    if shape == ():
        return as_array(x.sum())
    # Sum over the extra leading dimensions
    ndim_diff = x.ndim - len(shape)
    if ndim_diff > 0:
        x = x.sum(axis=tuple(range(ndim_diff)))
    reduce_dims = tuple(
        i for i, s in enumerate(shape) if s == 1 and x.shape[i] != 1)
    if reduce_dims:
        x = x.sum(axis=reduce_dims, keepdims=True)
    if x.shape != shape:
        x = x.reshape(shape)
    return x


# ──────────────────────── Calculation record ──────────────────────────

class Calculation:
    """One recorded application of a :class:`Function`.

    Owned by the output Variable.  Holds strong references to the inputs
    only, never to the output, so dropping the last handle on a result
    releases the whole graph behind it.
    """
    __slots__ = ('inputs', 'function', 'generation')

    def __init__(self, inputs: Sequence['Variable'], function: 'Function',
                 generation: int):
        self.inputs: tuple['Variable', ...] = tuple(inputs)
        self.function = function
        self.generation = generation

    def __repr__(self) -> str:
        return (f"<Calculation {self.function.name} "
                f"inputs={len(self.inputs)} generation={self.generation}>")


# ──────────────────────── Function base class ─────────────────────────

class Function:
    """Base class for all differentiable functions.

    Subclasses implement :meth:`forward` and :meth:`backward` over raw
    arrays and set :attr:`arity` (``None`` for variadic functions).
    Instances may hold configuration (an exponent, say) but must not be
    mutated by either method.
    """
    arity: int | None = None

    @property
    def name(self) -> str:
        return type(self).__name__

    def __call__(self, *inputs) -> 'Variable':
        from .variable import Variable

        inputs = [as_variable(x) for x in inputs]
        if self.arity is not None and len(inputs) != self.arity:
            raise ArityMismatchError(
                f"{self.name} takes {self.arity} input(s), "
                f"got {len(inputs)}")

        y = as_array(self.forward([x.data for x in inputs]))
        output = Variable(y)
        if Config.enable_backprop:
            generation = max((x.generation for x in inputs), default=-1) + 1
            output._creator = Calculation(inputs, self, generation)
            output._generation = generation
        return output

    def forward(self, xs: Sequence[np.ndarray]) -> np.ndarray:
        raise NotImplementedError

    def backward(self, xs: Sequence[np.ndarray],
                 gy: np.ndarray) -> tuple[np.ndarray, ...]:
        raise NotImplementedError

    def __repr__(self) -> str:
        return f"<{self.name}>"


__all__ = ['Function', 'Calculation', 'as_array', 'as_variable', 'sum_to']
