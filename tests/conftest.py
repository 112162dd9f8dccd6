import numpy as np
import pytest
from fixedrational.names import SIGNED_DTYPES, UNSIGNED_DTYPES

signed_dtypes = list(SIGNED_DTYPES) + [int]
all_dtypes = signed_dtypes + list(UNSIGNED_DTYPES)


@pytest.fixture(params=signed_dtypes, scope="session")
def signed_dtype(request: pytest.FixtureRequest):
    """Provide session-level fixture for signed base types."""
    return request.param


@pytest.fixture(params=all_dtypes, scope="session")
def dtype(request: pytest.FixtureRequest):
    """Provide session-level fixture for all base types."""
    return request.param


@pytest.fixture(params=[np.float16, np.float32, np.float64], scope="session")
def float_type(request: pytest.FixtureRequest):
    """Provide session-level fixture for floating point source types."""
    return request.param
