# ╔══════════════════════════════════════════════════════════════════════╗
# ║  Varigrad — Reverse-Mode Autodiff Core                               ║
# ║  Copyright © 2026 Pictofeed, LLC. All rights reserved.               ║
# ╚══════════════════════════════════════════════════════════════════════╝
"""
Varigrad — a minimal reverse-mode automatic differentiation engine.

Computations on :class:`Variable` objects are recorded as a DAG while
they run forward; :meth:`Variable.backward` replays it in descending
generation order and accumulates gradients on every upstream Variable.

Usage::

    import varigrad as vg

    x = vg.Variable(0.5)
    y = vg.square(vg.exp(vg.square(x)))
    y.backward()
    x.grad   # array(3.29744254)
"""
from __future__ import annotations

import logging

__version__ = "0.1.0"
__author__ = "Pictofeed, LLC"

logging.getLogger(__name__).addHandler(logging.NullHandler())

# ── Core graph types ──
from .variable import Variable
from .function import Function, Calculation, as_variable, as_array, sum_to
from .engine import backward, clear_grads, iter_variables

# ── Function catalog ──
from .ops import (
    square, exp, neg, log, sin, cos, tanh, pow,
    add, sub, mul, div, power, sum_n,
)

# ── Dtype constants ──
from .dtype import (
    dtype,
    float16, float32, float64,
    int32, int64,
    half, double, long,
)

# ── Grad mode ──
from .config import (
    Config,
    no_grad,
    using_config,
    is_grad_enabled,
    set_grad_enabled,
)

# ── Errors ──
from .errors import (
    VarigradError,
    MissingSeedError,
    ArityMismatchError,
    ShapeMismatchError,
    CycleDetectedError,
)

from . import utils

__all__ = [
    "__version__",
    "__author__",

    # Graph
    'Variable', 'Function', 'Calculation',
    'as_variable', 'as_array', 'sum_to',
    'backward', 'clear_grads', 'iter_variables',

    # Functions (`pow` stays off the star-import to keep the builtin)
    'square', 'exp', 'neg', 'log', 'sin', 'cos', 'tanh',
    'add', 'sub', 'mul', 'div', 'power', 'sum_n',

    # Dtypes
    'dtype', 'float16', 'float32', 'float64', 'int32', 'int64',
    'half', 'double', 'long',

    # Grad mode
    'Config', 'no_grad', 'using_config', 'is_grad_enabled',
    'set_grad_enabled',

    # Errors
    'VarigradError', 'MissingSeedError', 'ArityMismatchError',
    'ShapeMismatchError', 'CycleDetectedError',

    'utils',
]
