# ╔══════════════════════════════════════════════════════════════════════╗
# ║  Varigrad — Reverse-Mode Autodiff Core                               ║
# ║  Copyright © 2026 Pictofeed, LLC. All rights reserved.               ║
# ╚══════════════════════════════════════════════════════════════════════╝
"""Catalog of differentiable functions.

Each class implements :class:`~varigrad.function.Function` over raw
NumPy arrays; the lowercase helpers apply it to Variables (or anything
array-like) and return the output Variable.
"""
from __future__ import annotations

import numpy as np

from .function import Function, sum_to


# ──────────────────────── Unary ───────────────────────────────────────

class Square(Function):
    arity = 1

    def forward(self, xs):
        x, = xs
        return x ** 2

    def backward(self, xs, gy):
        x, = xs
        return (2 * x * gy,)


class Exp(Function):
    arity = 1

    def forward(self, xs):
        x, = xs
        return np.exp(x)

    def backward(self, xs, gy):
        x, = xs
        return (np.exp(x) * gy,)


class Neg(Function):
    arity = 1

    def forward(self, xs):
        x, = xs
        return -x

    def backward(self, xs, gy):
        return (-gy,)


class Log(Function):
    arity = 1

    def forward(self, xs):
        x, = xs
        return np.log(x)

    def backward(self, xs, gy):
        x, = xs
        return (gy / x,)


class Sin(Function):
    arity = 1

    def forward(self, xs):
        x, = xs
        return np.sin(x)

    def backward(self, xs, gy):
        x, = xs
        return (gy * np.cos(x),)


class Cos(Function):
    arity = 1

    def forward(self, xs):
        x, = xs
        return np.cos(x)

    def backward(self, xs, gy):
        x, = xs
        return (gy * (-np.sin(x)),)


class Tanh(Function):
    arity = 1

    def forward(self, xs):
        x, = xs
        return np.tanh(x)

    def backward(self, xs, gy):
        x, = xs
        t = np.tanh(x)
        return (gy * (1.0 - t * t),)


def _inexact_dtype(*xs) -> np.dtype:
    # Integer bases cannot take negative integer exponents in NumPy.
    dt = np.result_type(*xs)
    return dt if np.issubdtype(dt, np.inexact) else np.dtype(np.float64)


class Pow(Function):
    """``x ** c`` for a constant exponent *c* held as configuration."""
    arity = 1

    def __init__(self, c):
        self.c = c

    def forward(self, xs):
        x, = xs
        if np.issubdtype(x.dtype, np.integer) and np.any(np.asarray(self.c) < 0):
            return np.power(x, self.c, dtype=_inexact_dtype(x))
        return x ** self.c

    def backward(self, xs, gy):
        x, = xs
        c = self.c
        return (c * np.power(x, c - 1, dtype=_inexact_dtype(x)) * gy,)

    def __repr__(self) -> str:
        return f"<Pow c={self.c}>"


# ──────────────────────── Binary ──────────────────────────────────────
# Inputs may broadcast against each other; gradients are summed back
# down to each input's own shape.

class Add(Function):
    arity = 2

    def forward(self, xs):
        x0, x1 = xs
        return x0 + x1

    def backward(self, xs, gy):
        x0, x1 = xs
        return (sum_to(gy, x0.shape), sum_to(gy, x1.shape))


class Sub(Function):
    arity = 2

    def forward(self, xs):
        x0, x1 = xs
        return x0 - x1

    def backward(self, xs, gy):
        x0, x1 = xs
        return (sum_to(gy, x0.shape), sum_to(-gy, x1.shape))


class Mul(Function):
    arity = 2

    def forward(self, xs):
        x0, x1 = xs
        return x0 * x1

    def backward(self, xs, gy):
        x0, x1 = xs
        return (sum_to(gy * x1, x0.shape), sum_to(gy * x0, x1.shape))


class Div(Function):
    arity = 2

    def forward(self, xs):
        x0, x1 = xs
        return x0 / x1

    def backward(self, xs, gy):
        x0, x1 = xs
        gx0 = gy / x1
        gx1 = -gy * x0 / (x1 ** 2)
        return (sum_to(gx0, x0.shape), sum_to(gx1, x1.shape))


class Power(Function):
    """``x0 ** x1`` with a differentiable exponent."""
    arity = 2

    def forward(self, xs):
        x0, x1 = xs
        return np.power(x0, x1, dtype=_inexact_dtype(x0, x1))

    def backward(self, xs, gy):
        x0, x1 = xs
        dt = _inexact_dtype(x0, x1)
        y = np.power(x0, x1, dtype=dt)
        gx0 = x1 * np.power(x0, x1 - 1, dtype=dt) * gy
        # d/dx1 is undefined for non-positive bases; NumPy yields nan/inf.
        with np.errstate(divide='ignore', invalid='ignore'):
            gx1 = y * np.log(x0.astype(dt)) * gy
        return (sum_to(gx0, x0.shape), sum_to(gx1, x1.shape))


# ──────────────────────── Variadic ────────────────────────────────────

class SumN(Function):
    """Elementwise sum of any number of same-shaped inputs."""
    arity = None

    def forward(self, xs):
        if not xs:
            raise ValueError("SumN needs at least one input")
        out = xs[0]
        for x in xs[1:]:
            out = out + x
        return out

    def backward(self, xs, gy):
        return tuple(sum_to(gy, x.shape) for x in xs)


# ──────────────────────── Functional helpers ──────────────────────────

def square(x):
    return Square()(x)


def exp(x):
    return Exp()(x)


def neg(x):
    return Neg()(x)


def log(x):
    return Log()(x)


def sin(x):
    return Sin()(x)


def cos(x):
    return Cos()(x)


def tanh(x):
    return Tanh()(x)


def pow(x, c):
    return Pow(c)(x)


def power(x0, x1):
    return Power()(x0, x1)


def add(x0, x1):
    return Add()(x0, x1)


def sub(x0, x1):
    return Sub()(x0, x1)


def mul(x0, x1):
    return Mul()(x0, x1)


def div(x0, x1):
    return Div()(x0, x1)


def sum_n(*xs):
    return SumN()(*xs)


__all__ = [
    'Square', 'Exp', 'Neg', 'Log', 'Sin', 'Cos', 'Tanh', 'Pow',
    'Add', 'Sub', 'Mul', 'Div', 'Power', 'SumN',
    'square', 'exp', 'neg', 'log', 'sin', 'cos', 'tanh',
    'add', 'sub', 'mul', 'div', 'power', 'sum_n',
]
