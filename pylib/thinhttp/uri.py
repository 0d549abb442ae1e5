'''URI parsing via httpx.URL. Returns plain components for client configuration.'''

from dataclasses import dataclass

import httpx

from thinhttp.errors import ConfigurationError


@dataclass(frozen=True)
class UriParts:
    '''Parsed URL components.'''

    scheme: str  # lowercased; '' if absent
    host: str  # '' if absent
    port: int | None  # None when not given explicitly
    path: str  # decoded path, '/' at minimum for absolute URLs
    userinfo: str  # raw 'user:pass' portion; '' if absent
    username: str  # percent-decoded
    password: str  # percent-decoded
    netloc: str  # 'host[:port]' without userinfo
    raw_path: str  # path plus query string, still encoded


def parse_url(url: str) -> UriParts:
    '''
    Parse url into its components.

    Raises ConfigurationError if httpx cannot parse it at all.
    '''
    try:
        parsed = httpx.URL(url)
    except (httpx.InvalidURL, TypeError) as e:
        raise ConfigurationError(f'Invalid URL {url!r}: {e}') from e

    return UriParts(
        scheme=parsed.scheme.lower(),
        host=parsed.host,
        port=parsed.port,
        path=parsed.path or '/',
        userinfo=parsed.userinfo.decode('ascii'),
        username=parsed.username,
        password=parsed.password,
        netloc=parsed.netloc.decode('ascii'),
        raw_path=parsed.raw_path.decode('ascii') or '/',
    )
