"""Global test configuration and fixtures."""
import asyncio
import socket
import threading

import pytest
from aiohttp import web

from apiwire.clients.options import ClientOptions

from stubs import BASE_URL, StubTransport, make_raw

@pytest.fixture
def client_options():
    """Fixture for client options"""
    return ClientOptions(base_url=BASE_URL, timeout=5.0)

@pytest.fixture
def stub_transport():
    """Fixture for a transport with a few canned routes"""
    return StubTransport({
        "/users": make_raw(200, {"id": 1}),
        "/users/2": make_raw(200, {"id": 2}),
        "/empty": make_raw(204),
        "/moved": make_raw(302, "", {"Location": "/users"}),
        "/boom": make_raw(500, "error"),
        "/missing": make_raw(404, '{"error": "not found"}'),
        "/garbage": make_raw(200, "<html>not json</html>"),
        "/down": "Connection refused",
    })

async def _users(request):
    return web.json_response({"id": 1})

async def _slow(request):
    delay = float(request.query.get("delay", "0.3"))
    await asyncio.sleep(delay)
    return web.json_response({"delay": delay})

async def _echo(request):
    body = await request.text()
    return web.json_response({
        "method": request.method,
        "query": dict(request.query),
        "headers": dict(request.headers),
        "body": body
    })

async def _empty(request):
    return web.Response(status=204)

async def _boom(request):
    return web.Response(status=500, text="error")

async def _moved(request):
    return web.Response(status=302, headers={"Location": "/users"})

@pytest.fixture(scope="module")
def live_server():
    """Run an aiohttp server on a background thread and yield its base URL"""
    app = web.Application()
    app.router.add_get("/users", _users)
    app.router.add_get("/slow", _slow)
    app.router.add_route("*", "/echo", _echo)
    app.router.add_get("/empty", _empty)
    app.router.add_get("/boom", _boom)
    app.router.add_get("/moved", _moved)

    loop = asyncio.new_event_loop()
    runner = web.AppRunner(app)
    loop.run_until_complete(runner.setup())

    sock = socket.socket(socket.AF_INET, socket.SOCK_STREAM)
    sock.bind(("127.0.0.1", 0))
    port = sock.getsockname()[1]
    site = web.SockSite(runner, sock)
    loop.run_until_complete(site.start())

    thread = threading.Thread(target=loop.run_forever, daemon=True)
    thread.start()

    yield f"http://127.0.0.1:{port}"

    asyncio.run_coroutine_threadsafe(runner.cleanup(), loop).result(timeout=10)
    loop.call_soon_threadsafe(loop.stop)
    thread.join(timeout=10)
    loop.close()

@pytest.fixture
def closed_port():
    """A local port with nothing listening on it"""
    sock = socket.socket(socket.AF_INET, socket.SOCK_STREAM)
    sock.bind(("127.0.0.1", 0))
    port = sock.getsockname()[1]
    sock.close()
    return port
