# apiwire/clients/multi.py
# Created: 2026-10-19 11:26:50

from typing import Any, Dict, List, NamedTuple, Optional
from dataclasses import dataclass
from enum import Enum
import logging

from ..core.exceptions import ApiCallFailed, BatchStateError, DecodeFailure, TransportFailure
from ..core.utils import decode_json
from ..transport.base import Driver, Transport
from .base import HttpClient
from .options import ClientOptions
from .request import RequestDescriptor
from .response import ResponseRecord, parse_response

logger = logging.getLogger(__name__)

class BatchState(Enum):
    """Lifecycle of a MultiClient batch"""
    IDLE = "idle"
    ACCUMULATING = "accumulating"
    DRAINING = "draining"

class Submission(NamedTuple):
    """The request we queued, and the slot its response will be harvested under"""
    request: RequestDescriptor
    slot: int

@dataclass
class PendingCall:
    """A queued request and the transport handle it exclusively owns"""
    slot: int
    request: RequestDescriptor
    handle: Any
    driver: Driver
    released: bool = False

    def release(self) -> None:
        """Give the handle back to the driver; allowed exactly once"""
        if self.released:
            raise BatchStateError(f"Slot {self.slot} has already been released")
        self.released = True
        self.driver.release(self.handle)

def _should_decode(response: ResponseRecord) -> bool:
    return (
        response.status_code < 300
        and response.status_code != 204
        and len(response.raw_body) > 0
    )

class MultiClient(HttpClient):
    """
    Parallel HTTP client.

    The http_* verbs only register work; nothing touches the network until
    drain() runs the whole batch concurrently and harvests the responses,
    keyed by the slot each request was submitted under.

    A MultiClient instance is not thread-safe: submit and drain from the
    thread that owns it.
    """

    def __init__(
        self,
        options: ClientOptions,
        transport: Optional[Transport] = None
    ):
        super().__init__(options, transport)
        self._driver: Driver = self._transport.open_driver()
        self._calls: List[PendingCall] = []
        self.state = BatchState.IDLE

    def __len__(self) -> int:
        return len(self._calls)

    def _dispatch(self, request: RequestDescriptor, timeout: float) -> Submission:
        if self.state is BatchState.DRAINING:
            raise BatchStateError("Cannot submit a request while the batch is draining")

        handle = self._transport.configure(request, timeout)
        self._driver.register(handle)

        slot = len(self._calls)
        self._calls.append(PendingCall(slot=slot, request=request, handle=handle, driver=self._driver))
        self.state = BatchState.ACCUMULATING

        logger.debug(f"Queued slot {slot}", extra={"method": request.method.value, "url": request.url})
        return Submission(request=request, slot=slot)

    def drain(self, raise_for_status: bool = True) -> Dict[int, ResponseRecord]:
        """
        Run every queued request concurrently and harvest the responses

        Harvesting walks the slots in submission order and stops at the first
        failure; no partial results are returned. Whatever happens, every
        handle is released and the client is left idle and ready for a new
        batch.

        Args:
            raise_for_status: Fail with ApiCallFailed on the first response
                with a status above 399. When False, such responses are
                returned undecoded.

        Returns:
            Dict mapping each slot index to its ResponseRecord

        Raises:
            TransportFailure: a call failed at the network level
            ApiCallFailed: a call came back with an error status
            DecodeFailure: a successful response body is not valid JSON
        """
        if not self._calls:
            return {}

        self.state = BatchState.DRAINING
        try:
            logger.debug(f"Draining batch of {len(self._calls)} call(s)")
            self._driver.run_until_idle()

            running = self._driver.still_running()
            if running:
                raise BatchStateError(
                    f"Driver went idle with {running} call(s) still running",
                    details={"still_running": running}
                )

            results = self._harvest(raise_for_status)
            logger.info(f"Drained batch of {len(results)} call(s)")
            return results
        finally:
            self._reset()

    def _harvest(self, raise_for_status: bool) -> Dict[int, ResponseRecord]:
        results: Dict[int, ResponseRecord] = {}
        for call in self._calls:
            request = call.request
            extra = {"method": request.method.value, "url": request.url}
            try:
                raw_response = self._driver.read_result(call.handle)
            except TransportFailure as e:
                logger.error(f"Slot {call.slot} failed: {e.message}", extra=extra)
                details = dict(e.details)
                details.update({"slot": call.slot, "request": request.summary()})
                raise TransportFailure(f"Slot {call.slot}: {e.message}", details=details) from e
            finally:
                call.release()

            response = parse_response(raw_response)
            if raise_for_status and response.status_code > 399:
                error = ApiCallFailed.from_call(request, response)
                error.details["slot"] = call.slot
                logger.error(f"Slot {call.slot}: {error.message}", extra=extra)
                raise error

            if _should_decode(response):
                try:
                    payload = decode_json(response.raw_body)
                except DecodeFailure as e:
                    e.details["slot"] = call.slot
                    logger.error(f"Slot {call.slot}: {e.message}", extra=extra)
                    raise
                response = response.with_payload(payload)

            results[call.slot] = response
        return results

    def _reset(self, reopen: bool = True) -> None:
        """Release anything left over and start again with a fresh driver"""
        try:
            for call in self._calls:
                if not call.released:
                    call.release()
        finally:
            self._driver.close()
            if reopen:
                self._driver = self._transport.open_driver()
            self._calls = []
            self.state = BatchState.IDLE

    def close(self) -> None:
        """Abandon any queued calls and close the driver and owned transport"""
        self._reset(reopen=False)
        super().close()
