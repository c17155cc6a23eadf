"""Global pytest configuration for the sigguard test suite."""

import pytest

from sigguard import Runtime, configure


def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line("markers", "unit: mark test as unit test")
    config.addinivalue_line("markers", "integration: mark test as integration test")
    config.addinivalue_line("markers", "scenario: end-to-end declaration and call scenarios")
    config.addinivalue_line("markers", "runtime: tests the checks on/off switch")


@pytest.fixture(autouse=True)
def checks_enabled():
    """Run every test with checks on and leave them on afterwards."""
    runtime = configure(enabled=True)
    yield runtime
    configure(enabled=True)


@pytest.fixture
def checked_runtime() -> Runtime:
    """Provide a private runtime with checks on."""
    return Runtime(enabled=True)


@pytest.fixture
def passthrough_runtime() -> Runtime:
    """Provide a private runtime with checks off."""
    return Runtime(enabled=False)


@pytest.fixture
def sample_values():
    """Values spanning every value category."""
    return [
        "text", "", 0, 3, 2.5, True, False, None,
        [], ["a"], (1, 2), {}, {"k": 1}, len, lambda x: x, object(),
    ]
