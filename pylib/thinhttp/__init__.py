'''Thin async HTTP client: URL validation, query strings, timeout race, basic auth, optional JSON.'''

from thinhttp.client import HttpClient, build_query_string, normalize_headers
from thinhttp.errors import (
    ConfigurationError,
    DecodeError,
    HttpStatusError,
    RequestTimeoutError,
    ThinHttpError,
    TransportError,
)
from thinhttp.json_client import HttpJsonClient
from thinhttp.models import ClientConfig, PendingRequest, RequestHandle, ResponseEnvelope
from thinhttp.settings import HttpSettings

__all__ = [
    'ClientConfig',
    'ConfigurationError',
    'DecodeError',
    'HttpClient',
    'HttpJsonClient',
    'HttpSettings',
    'HttpStatusError',
    'PendingRequest',
    'RequestHandle',
    'RequestTimeoutError',
    'ResponseEnvelope',
    'ThinHttpError',
    'TransportError',
    'build_query_string',
    'normalize_headers',
]
