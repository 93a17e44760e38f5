"""
apiwire: a uniform HTTP client layer with sequential and parallel variants.
"""

# clients must load before transport; the transport modules depend on the
# request and response types defined there
from .clients import (
    CallResult,
    ClientOptions,
    HttpMethod,
    MultiClient,
    RequestDescriptor,
    ResponseRecord,
    SingleClient,
    Submission
)
from .core.config import Config
from .core.exceptions import (
    ApiwireError,
    ApiCallFailed,
    BatchStateError,
    ConfigError,
    DecodeFailure,
    TransportFailure
)
from .core.logger import Logger
from .transport import AiohttpTransport, RequestsTransport

__version__ = "1.0.0"

__all__ = [
    'CallResult',
    'ClientOptions',
    'HttpMethod',
    'MultiClient',
    'RequestDescriptor',
    'ResponseRecord',
    'SingleClient',
    'Submission',
    'Config',
    'Logger',
    'ApiwireError',
    'ApiCallFailed',
    'BatchStateError',
    'ConfigError',
    'DecodeFailure',
    'TransportFailure',
    'AiohttpTransport',
    'RequestsTransport'
]
