# tests/conftest.py
import pytest
from unitmaths.units.registry import UnitSystem


@pytest.fixture(scope="session")
def si():
    """Shared SI system; tests must not register into it."""
    return UnitSystem.si()


@pytest.fixture
def fresh_si():
    """Isolated SI system for tests that register units."""
    return UnitSystem.si()
