"""Pytest configuration and shared fixtures."""
import pytest
from fixtures.fake_backend import FakeBackend


@pytest.fixture
def cpu_only_backend():
    """
    Provide a FakeBackend that reports no GPU.

    Returns:
        FakeBackend: A backend with zero devices.
    """
    return FakeBackend(num_devices=0)


@pytest.fixture
def gpu_backend():
    """
    Provide a FakeBackend that reports two GPUs.

    Returns:
        FakeBackend: A backend with two devices.
    """
    return FakeBackend(num_devices=2)


@pytest.fixture
def output_lines():
    """
    Provide a list collecting written lines, to be passed as a `write` sink.

    Returns:
        list[str]: An empty list; use its `append` method as the sink.
    """
    return []
