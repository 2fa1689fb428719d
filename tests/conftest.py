"""
Pytest configuration and fixtures for PyFastResample test suite.

This file contains shared fixtures, test configuration, and utilities
used across the test suite.
"""
import os
import sys
import pytest
import numpy as np


def pytest_configure(config):
    """Configure pytest with custom settings."""
    # Add the package root to Python path for testing
    package_root = os.path.dirname(os.path.dirname(__file__))
    if package_root not in sys.path:
        sys.path.insert(0, package_root)

    for marker in (
        "unit: fast isolated tests",
        "integration: multi-component workflows",
        "importtest: module import checks",
        "slow: tests on larger rasters",
    ):
        config.addinivalue_line("markers", marker)


def pytest_collection_modifyitems(config, items):
    """Modify test collection to add markers and ordering."""
    for item in items:
        # Mark import tests for easy selection
        if "import" in item.name.lower() or "test_imports.py" in str(item.fspath):
            item.add_marker("importtest")


@pytest.fixture(autouse=True)
def reset_engine_config():
    """Drop any configuration a test installed."""
    yield
    from pyfastresample.config import set_config

    set_config(None)


class TestImageFactory:
    """Helper class for building synthetic RGBA buffers."""

    @staticmethod
    def random(width, height, seed=42):
        """Random RGBA buffer, alpha included."""
        from pyfastresample import PixelBuffer

        rng = np.random.default_rng(seed)
        data = rng.integers(0, 256, size=(height, width, 4), dtype=np.uint8)
        return PixelBuffer.from_array(data)

    @staticmethod
    def constant(width, height, color=(10, 200, 30, 255)):
        from pyfastresample import PixelBuffer

        return PixelBuffer.new(width, height, fill=color)

    @staticmethod
    def checkerboard(width, height, block=1):
        """Opaque black/white checkerboard with square cells of ``block`` pixels."""
        from pyfastresample import PixelBuffer

        y, x = np.mgrid[0:height, 0:width]
        white = ((x // block + y // block) % 2).astype(bool)
        data = np.zeros((height, width, 4), dtype=np.uint8)
        data[white, :3] = 255
        data[:, :, 3] = 255
        return PixelBuffer.from_array(data)

    @staticmethod
    def gradient(width, height):
        """Smooth opaque gradient, red along x and green along y."""
        from pyfastresample import PixelBuffer

        y, x = np.mgrid[0:height, 0:width]
        data = np.zeros((height, width, 4), dtype=np.uint8)
        data[:, :, 0] = np.round(255 * x / max(1, width - 1))
        data[:, :, 1] = np.round(255 * y / max(1, height - 1))
        data[:, :, 2] = 128
        data[:, :, 3] = 255
        return PixelBuffer.from_array(data)


@pytest.fixture
def image_factory():
    """Provide access to test image creation utilities."""
    return TestImageFactory()


@pytest.fixture(scope="session")
def sample_image():
    """Random 37x23 buffer shared by read-only tests."""
    return TestImageFactory.random(37, 23)
