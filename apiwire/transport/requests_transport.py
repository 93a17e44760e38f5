# apiwire/transport/requests_transport.py
# Created: 2026-10-20 09:40:31

from concurrent.futures import ThreadPoolExecutor, as_completed
from typing import Any, Optional
import logging

import requests
from requests.exceptions import RequestException, Timeout

from ..clients.request import RequestDescriptor
from ..clients.response import HEADER_ENCODING, RawResponse
from .handle import HandleDriver, TransportHandle, handle_failure

logger = logging.getLogger(__name__)

def _request_body(descriptor: RequestDescriptor) -> Any:
    if descriptor.payload is None:
        return None
    if isinstance(descriptor.payload, str):
        return descriptor.payload.encode('utf-8')
    if isinstance(descriptor.payload, bytes):
        return descriptor.payload
    return dict(descriptor.payload)

def _header_block(response: requests.Response) -> bytes:
    """Rebuild the header block from the underlying urllib3 response"""
    version = getattr(response.raw, 'version', 11) or 11
    status_line = f"HTTP/{version // 10}.{version % 10} {response.status_code} {response.reason or ''}".rstrip()
    lines = [status_line]
    lines.extend(f"{name}: {value}" for name, value in response.raw.headers.items())
    return ("\r\n".join(lines) + "\r\n\r\n").encode(HEADER_ENCODING, errors='replace')

def perform(session: requests.Session, handle: TransportHandle) -> None:
    """Run one handle, recording either its raw response or its error"""
    descriptor = handle.descriptor
    try:
        response = session.request(
            descriptor.method.value,
            descriptor.url,
            headers=dict(descriptor.headers),
            data=_request_body(descriptor),
            timeout=handle.timeout,
            allow_redirects=False
        )
    except Timeout:
        handle.error = f"Request timed out after {handle.timeout} seconds"
        return
    except RequestException as e:
        handle.error = str(e) or e.__class__.__name__
        return

    header_block = _header_block(response)
    handle.result = RawResponse(
        status_code=response.status_code,
        raw=header_block + response.content,
        header_size=len(header_block)
    )

class RequestsDriver(HandleDriver):
    """
    Batch driver that fans handles out over a thread pool.

    The calling thread blocks in run_until_idle() on the futures; worker
    threads share one requests session for the life of the batch.
    """

    def __init__(self, max_workers: int = 10):
        super().__init__()
        self._session = requests.Session()
        self._executor = ThreadPoolExecutor(max_workers=max_workers)

    def run_until_idle(self) -> None:
        futures = [
            self._executor.submit(perform, self._session, handle)
            for handle in self._unfinished()
        ]
        for completed, future in enumerate(as_completed(futures), start=1):
            future.result()
            logger.debug(f"{completed} of {len(futures)} call(s) completed")

    def close(self) -> None:
        if not self._closed:
            self._executor.shutdown(wait=True)
            self._session.close()
        super().close()

class RequestsTransport:
    """
    HTTP transport built on requests.

    Single calls run on the calling thread over one shared session. The
    timeout bounds the connect and each read separately, as requests does.
    """

    def __init__(self, max_workers: int = 10):
        self._session: Optional[requests.Session] = None
        self._max_workers = max_workers

    def configure(self, descriptor: RequestDescriptor, timeout: float) -> TransportHandle:
        return TransportHandle(descriptor=descriptor, timeout=timeout)

    def _get_session(self) -> requests.Session:
        """Get or create requests session"""
        if self._session is None:
            self._session = requests.Session()
        return self._session

    def execute(self, handle: TransportHandle) -> RawResponse:
        perform(self._get_session(), handle)
        if handle.error is not None:
            raise handle_failure(handle)
        return handle.result

    def open_driver(self) -> RequestsDriver:
        return RequestsDriver(max_workers=self._max_workers)

    def close(self) -> None:
        """Close the shared session"""
        if self._session is not None:
            self._session.close()
            self._session = None
