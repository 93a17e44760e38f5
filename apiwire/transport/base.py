# apiwire/transport/base.py
# Created: 2026-10-19 10:02:31

from typing import Any, Protocol

from ..clients.request import RequestDescriptor
from ..clients.response import RawResponse

class Driver(Protocol):
    """Runs many transport handles concurrently for one batch"""

    def register(self, handle: Any) -> None:
        """Add a configured handle to the batch"""
        ...

    def run_until_idle(self) -> None:
        """Block until every registered handle has completed or failed"""
        ...

    def still_running(self) -> int:
        """Number of registered handles that have not finished"""
        ...

    def read_result(self, handle: Any) -> RawResponse:
        """Return the handle's raw response, or raise TransportFailure"""
        ...

    def release(self, handle: Any) -> None:
        """Remove a handle from the batch"""
        ...

    def close(self) -> None:
        ...

class Transport(Protocol):
    """An HTTP backend the clients can drive"""

    def configure(self, descriptor: RequestDescriptor, timeout: float) -> Any:
        """Create a handle carrying one request's full configuration"""
        ...

    def execute(self, handle: Any) -> RawResponse:
        """Run one handle to completion, raising TransportFailure on network errors"""
        ...

    def open_driver(self) -> Driver:
        """Create a fresh, empty batch driver"""
        ...

    def close(self) -> None:
        ...
