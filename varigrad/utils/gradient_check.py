# ╔══════════════════════════════════════════════════════════════════════╗
# ║  Varigrad — Reverse-Mode Autodiff Core                               ║
# ║  Copyright © 2026 Pictofeed, LLC. All rights reserved.               ║
# ╚══════════════════════════════════════════════════════════════════════╝
"""varigrad.utils.gradient_check — Finite-difference verification.

Compares gradients produced by the backward engine against central
differences.  *f* is any callable taking one Variable and returning a
Variable; non-scalar outputs are reduced by summation, which matches the
all-ones seed used by :meth:`Variable.backward`.
"""
from __future__ import annotations

import logging
import numpy as np
from typing import Callable

from ..config import no_grad
from ..variable import Variable

logger = logging.getLogger(__name__)


def numerical_diff(f: Callable[[Variable], Variable], x, eps: float = 1e-4
                   ) -> np.ndarray:
    """Central-difference gradient of ``sum(f(x))`` with respect to *x*."""
    data = np.array(x.data if isinstance(x, Variable) else x, dtype=np.float64)
    grad = np.zeros_like(data)

    with no_grad():
        it = np.nditer(data, flags=['multi_index'])
        while not it.finished:
            idx = it.multi_index
            orig = data[idx]
            data[idx] = orig + eps
            y1 = np.sum(f(Variable(data.copy())).data)
            data[idx] = orig - eps
            y0 = np.sum(f(Variable(data.copy())).data)
            data[idx] = orig
            grad[idx] = (y1 - y0) / (2 * eps)
            it.iternext()
    return grad


def analytic_diff(f: Callable[[Variable], Variable], x) -> np.ndarray:
    """Gradient of ``sum(f(x))`` from a fresh backward pass."""
    v = Variable(np.array(x.data if isinstance(x, Variable) else x,
                          dtype=np.float64))
    f(v).backward()
    if v.grad is None:
        # f did not depend on its input
        return np.zeros_like(v.data)
    return v.grad


def gradient_check(f: Callable[[Variable], Variable], x, eps: float = 1e-4,
                   rtol: float = 1e-4, atol: float = 1e-5) -> bool:
    """Return True if analytic and numerical gradients agree."""
    num = numerical_diff(f, x, eps=eps)
    ana = analytic_diff(f, x)
    ok = bool(np.allclose(ana, num, rtol=rtol, atol=atol))
    if not ok:
        logger.warning(
            "gradient check failed: max |analytic - numerical| = %.3e",
            float(np.max(np.abs(ana - num))))
    return ok


__all__ = ['numerical_diff', 'analytic_diff', 'gradient_check']
