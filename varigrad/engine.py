# ╔══════════════════════════════════════════════════════════════════════╗
# ║  Varigrad — Reverse-Mode Autodiff Core                               ║
# ║  Copyright © 2026 Pictofeed, LLC. All rights reserved.               ║
# ╚══════════════════════════════════════════════════════════════════════╝
"""Backward engine — reverse-mode automatic differentiation.

Walks the DAG of :class:`~varigrad.function.Calculation` records from a
root Variable towards the leaves.  Calculations are visited in strictly
descending generation so that each one runs only after every consumer of
its output has contributed to that output's gradient.  A plain
depth-first or LIFO walk gets diamonds (branch, then re-merge) wrong.
"""
from __future__ import annotations

import heapq
import itertools
import logging
import numpy as np
from typing import TYPE_CHECKING, Iterator, Sequence

from .errors import (
    ArityMismatchError,
    CycleDetectedError,
    MissingSeedError,
    ShapeMismatchError,
)

if TYPE_CHECKING:
    from .function import Calculation
    from .variable import Variable

logger = logging.getLogger(__name__)


# ──────────────────────── Seeding ─────────────────────────────────────

def _seed(root: 'Variable') -> np.ndarray:
    data = root.data
    if not (np.issubdtype(data.dtype, np.number)
            or np.issubdtype(data.dtype, np.bool_)):
        raise MissingSeedError(
            f"cannot seed a ones gradient for data of type {data.dtype}; "
            f"call seed_grad() first")
    return np.ones_like(data)


# ──────────────────────── Gradient validation ─────────────────────────

def _check_grads(calc: 'Calculation', gxs) -> Sequence[np.ndarray]:
    """Validate a ``backward`` result before any of it is written."""
    if not isinstance(gxs, (tuple, list)):
        gxs = (gxs,)
    if len(gxs) != len(calc.inputs):
        raise ArityMismatchError(
            f"{calc.function.name}.backward returned {len(gxs)} "
            f"gradient(s) for {len(calc.inputs)} input(s)")
    checked = []
    for i, (x, gx) in enumerate(zip(calc.inputs, gxs)):
        if x._generation >= calc.generation:
            raise CycleDetectedError(
                f"input {i} generation {x._generation} is not below "
                f"{calc.function.name} generation {calc.generation}")
        gx = gx if isinstance(gx, np.ndarray) else np.asarray(gx)
        if gx.shape != x.shape:
            raise ShapeMismatchError(
                f"{calc.function.name}.backward gradient for input {i}",
                x.shape, gx.shape)
        checked.append(gx)
    return checked


# ──────────────────────── Backward pass ───────────────────────────────

def backward(root: 'Variable') -> None:
    """Run the backward pass from *root*.

    If *root* has no gradient it is seeded with ones shaped like its data;
    otherwise its current gradient is the seed.  Gradients reaching a
    Variable from several consumers are summed.

    Each pass propagates its own contributions and adds them to the
    user-visible ``grad`` slots once, so a second call without clearing
    adds exactly one more derivative rather than feeding the previous
    result back into the traversal.
    """
    if root._grad is None:
        root._grad = _seed(root)

    # Contributions of this pass only, keyed by id(); every keyed
    # Variable stays alive through the graph for the whole pass.
    grad_out: dict[int, np.ndarray] = {id(root): root._grad}

    # Max-priority on generation via negated key; the counter breaks ties
    # so Calculation objects are never compared.
    frontier: list = []
    queued: set[int] = set()
    counter = itertools.count()

    def enqueue(var: 'Variable') -> None:
        calc = var._creator
        if calc is None or id(calc) in queued:
            return
        queued.add(id(calc))
        heapq.heappush(frontier, (-calc.generation, next(counter), calc, var))

    enqueue(root)
    logger.debug("backward from %r (generation %d)", root, root.generation)

    processed = 0
    while frontier:
        _, _, calc, output = heapq.heappop(frontier)
        gy = grad_out[id(output)]
        xs = [x._data for x in calc.inputs]
        gxs = _check_grads(calc, calc.function.backward(xs, gy))
        processed += 1

        for x, gx in zip(calc.inputs, gxs):
            # Out-of-place: functions like Add hand the same array to
            # several inputs.
            prev = grad_out.get(id(x))
            grad_out[id(x)] = gx if prev is None else prev + gx
            x._grad = gx if x._grad is None else x._grad + gx
            enqueue(x)

    logger.debug("backward finished: %d calculation(s) processed", processed)


# ──────────────────────── Graph helpers ───────────────────────────────

def iter_variables(root: 'Variable') -> Iterator['Variable']:
    """Yield every Variable reachable from *root*, *root* first.

    Uses an explicit stack to avoid Python recursion limits on deep
    chains.
    """
    seen: set[int] = set()
    stack = [root]
    while stack:
        var = stack.pop()
        if id(var) in seen:
            continue
        seen.add(id(var))
        yield var
        if var._creator is not None:
            stack.extend(var._creator.inputs)


def clear_grads(root: 'Variable') -> None:
    """Reset the gradient of *root* and every Variable upstream of it."""
    for var in iter_variables(root):
        var.cleargrad()


__all__ = ['backward', 'clear_grads', 'iter_variables']
