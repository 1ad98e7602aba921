import numpy as np
import pytest
import taichi as ti

import wavefront_state as state
from wavefront_params import ParameterGenerator, ParameterSet


@pytest.fixture(scope="session", autouse=True)
def taichi_backend():
    state.init_backend(ti.cpu)
    yield
    ti.reset()


@pytest.fixture
def params():
    return ParameterSet(a1=0, a2=1, a3=2, p=0.2, q=0.1, r=0.1, s=0.5, v=0.1, w=0.2, u=0.0)


@pytest.fixture
def generator():
    return ParameterGenerator(rng=np.random.default_rng(1234))
