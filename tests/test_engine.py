"""Tests for the backward engine: seeding, accumulation and ordering."""
import sys
import os
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

import numpy as np

import varigrad as vg
from varigrad import Variable, add, exp, square
from varigrad.utils.gradient_check import numerical_diff


def test_square_backward():
    x = Variable(np.array(3.0))
    y = square(x)
    y.backward()
    assert y.data == 9.0, f"Expected 9.0, got {y.data}"
    assert x.grad == 6.0, f"Expected 6.0, got {x.grad}"


def test_exp_backward():
    x = Variable(np.array([-1.0, 0.0, 2.0]))
    y = exp(x)
    y.backward()
    np.testing.assert_allclose(y.data, np.exp(x.data))
    np.testing.assert_allclose(x.grad, np.exp(x.data))


def test_composite_chain():
    x = Variable(np.array(0.5))
    y = square(exp(square(x)))
    y.backward()
    assert abs(x.grad - 3.297442541) < 1e-6, f"x.grad = {x.grad}"

    num = numerical_diff(lambda v: square(exp(square(v))), x.data)
    assert abs(x.grad - num) < 1e-4, f"analytic {x.grad} vs numeric {num}"


def test_seed_is_ones_shaped_like_output():
    x = Variable(np.arange(6, dtype=np.float64).reshape(2, 3))
    y = square(x)
    y.backward()
    assert y.grad.shape == (2, 3)
    assert np.all(y.grad == 1.0)
    np.testing.assert_allclose(x.grad, 2 * x.data)


def test_diamond_accumulates():
    x = Variable(np.array(3.0))
    z = add(square(x), square(x))
    z.backward()
    assert z.data == 18.0
    # 2x + 2x, not an overwritten 2x
    assert x.grad == 12.0, f"Expected 12.0 (accumulated), got {x.grad}"


def test_same_input_twice():
    x = Variable(np.array(3.0))
    y = add(x, x)
    y.backward()
    assert x.grad == 2.0, f"Expected 2.0, got {x.grad}"


def test_shared_node_shallow_and_deep_paths():
    # a feeds z directly and through a three-step chain:
    #   z = a + exp(square(square(a)))
    # dz/da = 1 + exp(a^4) * 4a^3
    x = Variable(np.array(0.7))
    a = square(x)
    deep = exp(square(square(a)))
    z = add(a, deep)
    z.backward()

    av = x.data ** 2
    expected_a = 1.0 + np.exp(av ** 4) * 4 * av ** 3
    np.testing.assert_allclose(a.grad, expected_a, rtol=1e-10)
    np.testing.assert_allclose(x.grad, expected_a * 2 * x.data, rtol=1e-10)


def test_shared_node_independent_of_build_order():
    def build(deep_first):
        x = Variable(np.array(0.7))
        a = square(x)
        if deep_first:
            deep = exp(square(square(a)))
            z = add(deep, a)
        else:
            shallow = a
            deep = exp(square(square(a)))
            z = add(shallow, deep)
        z.backward()
        return a.grad, x.grad

    a1, x1 = build(True)
    a2, x2 = build(False)
    np.testing.assert_allclose(a1, a2)
    np.testing.assert_allclose(x1, x2)


def test_reconverging_branches():
    # x -> a, b -> c = a*b -> d = c + a ; a consumed at two depths
    x = Variable(np.array(1.5))
    a = exp(x)
    b = square(x)
    c = a * b
    d = c + a
    d.backward()
    xv = 1.5
    expected = np.exp(xv) * xv ** 2 + np.exp(xv) * 2 * xv + np.exp(xv)
    np.testing.assert_allclose(x.grad, expected, rtol=1e-10)

    num = numerical_diff(
        lambda v: exp(v) * square(v) + exp(v), np.array(xv))
    assert abs(x.grad - num) < 1e-4


def test_leaf_is_terminal():
    x = Variable(np.array(2.0))
    assert x.creator is None and x.is_leaf
    x.backward()
    assert x.grad == 1.0


def test_disconnected_variable_keeps_no_grad():
    x = Variable(np.array(2.0))
    unrelated = Variable(np.array(5.0))
    other = square(unrelated)
    y = square(x)
    y.backward()
    assert unrelated.grad is None
    assert other.grad is None
    assert x.grad == 4.0


def test_repeated_backward_accumulates():
    x = Variable(np.array(3.0))
    y = square(x)
    y.backward()
    y.backward()
    assert x.grad == 12.0, f"Expected 12.0 after two passes, got {x.grad}"


def test_repeated_backward_on_deep_chain_adds_one_derivative():
    x = Variable(np.array(0.5))
    a = square(x)
    b = exp(a)
    y = square(b)
    y.backward()
    first_x = x.grad.copy()
    first_a = a.grad.copy()
    y.backward()
    np.testing.assert_allclose(x.grad, 2 * first_x, rtol=1e-12)
    np.testing.assert_allclose(a.grad, 2 * first_a, rtol=1e-12)
    # the root keeps its seed; it is not added to itself
    assert y.grad == 1.0
    y.backward()
    np.testing.assert_allclose(x.grad, 3 * first_x, rtol=1e-12)


def test_repeated_backward_through_diamond():
    x = Variable(np.array(1.5))
    z = add(square(x), exp(square(x)))
    z.backward()
    first = x.grad.copy()
    z.backward()
    np.testing.assert_allclose(x.grad, 2 * first, rtol=1e-12)


def test_clear_grads_then_rerun():
    x = Variable(np.array(0.5))
    y = square(exp(square(x)))
    y.backward()
    first = x.grad.copy()
    vg.clear_grads(y)
    assert x.grad is None and y.grad is None
    y.backward()
    np.testing.assert_allclose(x.grad, first)


def test_custom_seed():
    x = Variable(np.array([1.0, 2.0]))
    y = square(x)
    y.seed_grad(np.array([3.0, 0.5]))
    y.backward()
    np.testing.assert_allclose(x.grad, [6.0, 2.0])


def test_seed_not_mutated_by_accumulation():
    x = Variable(np.array([1.0, 2.0]))
    seed = np.array([1.0, 1.0])
    y = add(x, x)
    y.seed_grad(seed)
    y.backward()
    np.testing.assert_array_equal(seed, [1.0, 1.0])
    np.testing.assert_allclose(x.grad, [2.0, 2.0])


def test_deep_chain_terminates():
    x = Variable(np.array(1.0))
    y = x
    for _ in range(2000):
        y = add(y, Variable(np.array(0.0)))
    y.backward()
    assert x.grad == 1.0
    assert y.generation == 2000


def test_engine_entry_point_matches_method():
    x = Variable(np.array(1.25))
    vg.backward(square(x))
    assert x.grad == 2.5


def test_iter_variables_visits_each_once():
    x = Variable(np.array(2.0))
    a = square(x)
    z = add(a, a)
    seen = list(vg.iter_variables(z))
    assert seen[0] is z
    assert len(seen) == 3
    assert {id(v) for v in seen} == {id(x), id(a), id(z)}
