import math

import numpy as np
import pytest

import wavefront_field as field
from wavefront_init import seed_ring
from wavefront_params import ParameterSet


def closed_form(x, y, z, ps):
    shuffle = [x, y, z]
    s1, s2, s3 = shuffle[ps.a1], shuffle[ps.a2], shuffle[ps.a3]
    i = ps.q * math.cos(math.pi * s3 / (s2 + ps.p * (s1 + ps.q) * math.pi + z))
    j = ps.r * math.sin(math.pi * s2 * math.cos(math.pi * x) / (s2 + ps.r * -(x + ps.s)) + x)
    k = ps.w * math.sin(math.pi * s1 / (s2 + ps.v / (s3 - s2 + ps.w)) + s1)
    return i, j, k


def test_origin_reference_triple():
    ps = ParameterSet(a1=0, a2=1, a3=2, p=0.0, q=0.1, r=0.1, s=0.5, v=0.1, w=0.2, u=0.0)
    i, j, k = field.evaluate((0.0, 0.0, 0.0), ps)
    # first component divides 0 by 0 and propagates NaN
    assert math.isnan(i)
    assert j == pytest.approx(0.0)
    assert k == pytest.approx(0.0)


def test_matches_closed_form(params):
    pt = (0.3, -0.7, 0.5)
    np.testing.assert_allclose(field.evaluate(pt, params), closed_form(*pt, params), rtol=1e-9)


def test_axis_selectors_shuffle_coordinates():
    ps = ParameterSet(a1=2, a2=0, a3=1, p=-0.4, q=0.6, r=-0.3, s=0.2, v=0.7, w=-0.5, u=0.9)
    pt = (0.25, 0.8, -0.35)
    np.testing.assert_allclose(field.evaluate(pt, ps), closed_form(*pt, ps), rtol=1e-9)


def test_batch_evaluation_matches_pointwise(params):
    pts = seed_ring(count=8)
    out = field.evaluate(pts, params)
    assert out.shape == pts.shape
    for pt, vec in zip(pts, out):
        np.testing.assert_allclose(vec, field.evaluate(pt, params), rtol=1e-12)


def test_step_preserves_count_and_order(params):
    pts = seed_ring(count=12)
    nxt = field.step(pts, 0.01, params)
    assert nxt.shape == pts.shape
    np.testing.assert_allclose(nxt, pts + 0.01 * field.evaluate(pts, params))
    # small step keeps each point closest to its own origin
    nearest = np.argmin(np.linalg.norm(nxt[:, None, :] - pts[None, :, :], axis=2), axis=1)
    assert list(nearest) == list(range(len(pts)))


def test_step_returns_new_array(params):
    pts = seed_ring(count=4)
    before = pts.copy()
    field.step(pts, 0.5, params)
    np.testing.assert_array_equal(pts, before)


def test_step_propagates_non_finite_without_error():
    ps = ParameterSet(a1=0, a2=1, a3=2, p=0.0, q=0.1, r=0.1, s=0.5, v=0.1, w=0.2, u=0.0)
    nxt = field.step([[0.0, 0.0, 0.0], [0.3, -0.7, 0.5]], 0.1, ps)
    assert math.isnan(nxt[0, 0])
    assert np.all(np.isfinite(nxt[1]))
