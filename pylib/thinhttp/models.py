'''Client configuration, per-call request and response envelope types.'''

from collections.abc import AsyncIterable, Iterable
from dataclasses import dataclass, field
from typing import Any, Union

import httpx

# Raw payloads passed through unchanged as the request body
RawBody = Union[bytes, str, Iterable[bytes], AsyncIterable[bytes]]


@dataclass(frozen=True)
class ClientConfig:
    '''Connection configuration. Replaced as a whole on every configure().'''

    scheme: str
    host: str
    port: int | None
    path: str
    auth_username: str = ''
    auth_password: str = ''
    timeout: float = 30.0  # seconds; 0 sends without the timeout race
    return_raw_response: bool = False


@dataclass
class RequestHandle:
    '''
    Stored request target. Headers, cookies and redirect policy carry over
    when the URL changes; the URL itself does not.
    '''

    url: str
    headers: httpx.Headers = field(default_factory=httpx.Headers)
    cookies: httpx.Cookies = field(default_factory=httpx.Cookies)
    follow_redirects: bool = True


@dataclass
class PendingRequest:
    '''Built fresh for each call; never shared across calls.'''

    method: str
    headers: httpx.Headers
    body: RawBody | None = None
    query_string: str | None = None


@dataclass
class ResponseEnvelope:
    '''
    Uniform result of every call.

    code is None only if the call failed before a response was produced; body then
    holds the caught exception. For a non-ok status, body is an HttpStatusError instance.
    '''

    code: int | None
    headers: dict[str, str] | None
    body: Any = None
    raw_response: httpx.Response | None = None

    @property
    def ok(self) -> bool:
        return self.code is not None and not isinstance(self.body, BaseException)
