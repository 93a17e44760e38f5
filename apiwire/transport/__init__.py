# apiwire/transport/__init__.py
# Created: 2026-10-19 10:01:05

"""
HTTP backends the clients can be driven over.
"""

from .base import Driver, Transport
from .handle import HandleDriver, TransportHandle
from .aiohttp_transport import AiohttpDriver, AiohttpTransport
from .requests_transport import RequestsDriver, RequestsTransport

__all__ = [
    'Driver',
    'Transport',
    'HandleDriver',
    'TransportHandle',
    'AiohttpDriver',
    'AiohttpTransport',
    'RequestsDriver',
    'RequestsTransport'
]
