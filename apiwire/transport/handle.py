# apiwire/transport/handle.py
# Created: 2026-10-20 09:12:04

from typing import List, Optional
from dataclasses import dataclass

from ..core.exceptions import BatchStateError, TransportFailure
from ..clients.request import RequestDescriptor
from ..clients.response import RawResponse

@dataclass(eq=False)
class TransportHandle:
    """
    One request's configuration and, once run, its outcome.

    Handles compare by identity: two identical requests in one batch are
    still two separate handles.
    """
    descriptor: RequestDescriptor
    timeout: float
    result: Optional[RawResponse] = None
    error: Optional[str] = None

    @property
    def finished(self) -> bool:
        return self.result is not None or self.error is not None

def handle_failure(handle: TransportHandle) -> TransportFailure:
    return TransportFailure(
        f"HTTP call failed: {handle.error}",
        details={"error": handle.error}
    )

class HandleDriver:
    """Handle bookkeeping shared by the batch drivers"""

    def __init__(self):
        self._handles: List[TransportHandle] = []
        self._closed = False

    def register(self, handle: TransportHandle) -> None:
        if self._closed:
            raise BatchStateError("Cannot register a handle on a closed driver")
        self._handles.append(handle)

    def _unfinished(self) -> List[TransportHandle]:
        return [handle for handle in self._handles if not handle.finished]

    def still_running(self) -> int:
        return len(self._unfinished())

    def read_result(self, handle: TransportHandle) -> RawResponse:
        if handle.error is not None:
            raise handle_failure(handle)
        if handle.result is None:
            raise TransportFailure(
                "HTTP call never completed",
                details={"error": "not completed"}
            )
        return handle.result

    def release(self, handle: TransportHandle) -> None:
        try:
            self._handles.remove(handle)
        except ValueError:
            raise BatchStateError("Handle is not registered with this driver")

    def close(self) -> None:
        self._closed = True
        self._handles = []
