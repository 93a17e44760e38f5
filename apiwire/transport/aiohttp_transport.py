# apiwire/transport/aiohttp_transport.py
# Created: 2026-10-19 10:15:48

from typing import Any, Optional
import asyncio
import logging

import aiohttp

from ..clients.request import RequestDescriptor
from ..clients.response import RawResponse
from .handle import HandleDriver, TransportHandle, handle_failure

logger = logging.getLogger(__name__)

def _request_body(descriptor: RequestDescriptor) -> Any:
    if descriptor.payload is None:
        return None
    if isinstance(descriptor.payload, (str, bytes)):
        return descriptor.payload
    return dict(descriptor.payload)

def _header_block(response: aiohttp.ClientResponse) -> bytes:
    """Rebuild the header block as it came over the wire"""
    version = response.version or aiohttp.HttpVersion11
    status_line = f"HTTP/{version.major}.{version.minor} {response.status} {response.reason or ''}".rstrip()
    lines = [status_line.encode('iso-8859-1')]
    lines.extend(name + b": " + value for name, value in response.raw_headers)
    return b"\r\n".join(lines) + b"\r\n\r\n"

async def perform(session: aiohttp.ClientSession, handle: TransportHandle) -> None:
    """Run one handle, recording either its raw response or its error"""
    descriptor = handle.descriptor
    try:
        async with session.request(
            descriptor.method.value,
            descriptor.url,
            headers=dict(descriptor.headers),
            data=_request_body(descriptor),
            timeout=aiohttp.ClientTimeout(total=handle.timeout),
            allow_redirects=False
        ) as response:
            body = await response.read()
            header_block = _header_block(response)
            handle.result = RawResponse(
                status_code=response.status,
                raw=header_block + body,
                header_size=len(header_block)
            )
    except asyncio.TimeoutError:
        handle.error = f"Request timed out after {handle.timeout} seconds"
    except aiohttp.ClientError as e:
        handle.error = str(e) or e.__class__.__name__

class AiohttpDriver(HandleDriver):
    """
    Batch driver backed by a private event loop.

    Every registered handle runs as its own task on one loop; the calling
    thread blocks in run_until_idle() until all of them have finished.
    """

    def __init__(self):
        super().__init__()
        self._loop = asyncio.new_event_loop()

    def run_until_idle(self) -> None:
        if self.still_running() == 0:
            return
        self._loop.run_until_complete(self._drive())

    async def _drive(self) -> None:
        async with aiohttp.ClientSession() as session:
            pending = {
                asyncio.ensure_future(perform(session, handle))
                for handle in self._unfinished()
            }
            try:
                while pending:
                    done, pending = await asyncio.wait(pending, return_when=asyncio.FIRST_COMPLETED)
                    for task in done:
                        task.result()
                    logger.debug(f"{len(done)} call(s) completed, {len(pending)} still running")
            finally:
                for task in pending:
                    task.cancel()
                if pending:
                    await asyncio.gather(*pending, return_exceptions=True)

    def close(self) -> None:
        if not self._loop.is_closed():
            self._loop.close()
        super().close()

class AiohttpTransport:
    """
    HTTP transport built on aiohttp.

    Single calls share one session on a private event loop, so keep-alive
    connections are reused between calls. Batches get a fresh driver each.
    """

    def __init__(self):
        self._loop: Optional[asyncio.AbstractEventLoop] = None
        self._session: Optional[aiohttp.ClientSession] = None

    def configure(self, descriptor: RequestDescriptor, timeout: float) -> TransportHandle:
        return TransportHandle(descriptor=descriptor, timeout=timeout)

    def _get_loop(self) -> asyncio.AbstractEventLoop:
        if self._loop is None or self._loop.is_closed():
            self._loop = asyncio.new_event_loop()
        return self._loop

    async def _get_session(self) -> aiohttp.ClientSession:
        """Get or create aiohttp session"""
        if self._session is None or self._session.closed:
            self._session = aiohttp.ClientSession()
        return self._session

    async def _execute(self, handle: TransportHandle) -> None:
        session = await self._get_session()
        await perform(session, handle)

    def execute(self, handle: TransportHandle) -> RawResponse:
        self._get_loop().run_until_complete(self._execute(handle))
        if handle.error is not None:
            raise handle_failure(handle)
        return handle.result

    def open_driver(self) -> AiohttpDriver:
        return AiohttpDriver()

    def close(self) -> None:
        """Close the shared session and its event loop"""
        if self._loop is None or self._loop.is_closed():
            return
        if self._session is not None and not self._session.closed:
            self._loop.run_until_complete(self._session.close())
        self._loop.close()
        self._session = None
