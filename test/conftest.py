import pytest
import numpy as np

from pyELP_series import config


@pytest.fixture(autouse=True)
def restore_backend():
    """ Restores the configured backend after each test """
    backend = config.get_backend()
    yield
    config.set_backend(backend)


@pytest.fixture(params=['numpy', 'numba'])
def backend(request):
    """ Runs a test once per summation backend """
    with config.use_backend(request.param):
        yield request.param


@pytest.fixture
def rng():
    """ Returns a seeded random number generator """
    return np.random.default_rng(20100608)
