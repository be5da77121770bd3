"""
Pytest configuration and shared fixtures for propgen tests.
"""

import pytest

from propgen.config import GenerationConfig, set_config
from propgen.core.random_source import StdRng, XorShiftRng


# Pytest configuration
def pytest_configure(config):
    """Configure pytest with custom markers."""
    config.addinivalue_line("markers", "unit: mark test as unit test (fast, isolated)")
    config.addinivalue_line("markers", "property: mark test as Hypothesis property test")
    config.addinivalue_line("markers", "slow: mark test as slow running")


def pytest_collection_modifyitems(config, items):
    """Add markers based on test location."""
    for item in items:
        if "unit" in str(item.fspath):
            item.add_marker(pytest.mark.unit)
        elif "property" in str(item.fspath):
            item.add_marker(pytest.mark.property)


# Random source fixtures
@pytest.fixture
def rng() -> StdRng:
    """Deterministically seeded default source."""
    return StdRng.seed_from(42)


@pytest.fixture
def xorshift_rng() -> XorShiftRng:
    """Deterministically seeded xorshift source."""
    return XorShiftRng(2463534242)


@pytest.fixture(params=["std", "xorshift"])
def any_rng(request):
    """Each concrete random source, seeded."""
    if request.param == "std":
        return StdRng.seed_from(7)
    return XorShiftRng(7)


# Configuration fixtures
@pytest.fixture
def seeded_config() -> GenerationConfig:
    """Config with a fixed seed and small defaults."""
    return GenerationConfig(seed=1234, default_size=10, sample_count=50)


@pytest.fixture(autouse=True)
def isolate_config():
    """Ensure no test leaks a process-wide config into another."""
    set_config(None)
    yield
    set_config(None)
