"""Upstream data providers module."""

from mgnrega.providers.performance_provider import PerformanceProvider
from mgnrega.providers.stub_provider import StubPerformanceProvider

__all__ = [
    "PerformanceProvider",
    "StubPerformanceProvider",
]
