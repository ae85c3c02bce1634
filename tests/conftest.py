"""Pytest configuration for whitted tests.

This module provides shared fixtures for all test modules, including
Taichi initialization which must happen once per session.
"""

import pytest
import taichi as ti


@pytest.fixture(scope="session", autouse=True)
def init_taichi_session():
    """Initialize Taichi once for the entire test session.

    Using session scope prevents multiple ti.init() calls which can cause
    segmentation faults due to Taichi runtime conflicts. Every Canvas in the
    tests allocates its field under this runtime.
    """
    ti.init(arch=ti.cpu)
    yield


@pytest.fixture
def default_world():
    """The two-sphere reference world used by the shading tests."""
    from whitted.scene.presets import default_world as make_default_world

    return make_default_world()
