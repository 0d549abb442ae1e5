'''
Content Negotiation Wrapper: JSON-encoded requests and responses on top of HttpClient.

Mappings and lists are sent as JSON; responses declaring application/json are
decoded. Malformed JSON raises DecodeError from request() instead of being
returned in the envelope.
'''

import json
import re
from collections.abc import Mapping
from typing import Any

import httpx
import structlog

from thinhttp.client import HttpClient
from thinhttp.errors import DecodeError, HttpStatusError, TransportError
from thinhttp.models import RawBody, ResponseEnvelope
from thinhttp.settings import HttpSettings
from thinhttp.transport import Timer, Transport

logger = structlog.get_logger()

JSON_MEDIA_TYPE = 'application/json'
JSON_CONTENT_TYPE_PATTERN = re.compile(r'^application/json\s*(;.*)?$', re.IGNORECASE)


def is_json_content_type(content_type: str | None) -> bool:
    return bool(content_type) and JSON_CONTENT_TYPE_PATTERN.match(content_type.strip()) is not None


def decode_json(content: bytes) -> Any:
    '''Decoded document, or None for an empty body. Raises DecodeError.'''
    if not content.strip():
        return None
    try:
        return json.loads(content)
    except (json.JSONDecodeError, UnicodeDecodeError) as e:
        raise DecodeError(f'Invalid JSON response body: {e}', content=content) from e


class HttpJsonClient(HttpClient):
    '''HTTP client for JSON-encoded requests and responses.'''

    def __init__(
        self,
        url: str,
        timeout: float | None = None,
        *,
        transport: Transport | None = None,
        timer: Timer | None = None,
        settings: HttpSettings | None = None,
    ) -> None:
        # Raw-response mode so the content type can be checked before reading the body
        super().__init__(url, timeout, True, transport=transport, timer=timer, settings=settings)

    async def request(
        self,
        method: str,
        separator: str = ';',
        params: Mapping[str, Any] | str | None = None,
        data: Mapping[str, Any] | list | RawBody | None = None,
    ) -> ResponseEnvelope:
        '''
        Like HttpClient.request, with JSON bodies decoded. Raises DecodeError if a
        response declares JSON but does not contain it.
        '''
        envelope = await super().request(method, separator, params, data)
        return await self._decode_response(method.upper(), envelope)

    def _encode_body(self, data: Mapping[str, Any] | list | RawBody, headers: httpx.Headers) -> RawBody:
        if not isinstance(data, (Mapping, list)):
            return super()._encode_body(data, headers)

        if 'accept' not in headers:
            headers['accept'] = JSON_MEDIA_TYPE
        if 'content-type' not in headers:
            charset = self.settings.effective_charset()
            headers['content-type'] = f'{JSON_MEDIA_TYPE}; charset={charset}' if charset else JSON_MEDIA_TYPE
        return json.dumps(data, separators=(',', ':'))

    async def _decode_response(self, method: str, envelope: ResponseEnvelope) -> ResponseEnvelope:
        '''Replace the raw response handle with the decoded (or raw bytes) body.'''
        response = envelope.raw_response
        if response is None:
            return envelope

        try:
            content_type = (envelope.headers or {}).get('content_type')
            wants_body = method != 'HEAD'
            if wants_body and is_json_content_type(content_type):
                envelope.body = decode_json(await self._read(response))
            elif wants_body and not isinstance(envelope.body, HttpStatusError):
                envelope.body = await self._read(response)
        except TransportError as e:
            logger.info('response body read failed', method=method, url=self.url, error=str(e))
            return ResponseEnvelope(code=None, headers=None, body=e)
        finally:
            envelope.raw_response = None
            await response.aclose()
        return envelope

    async def _read(self, response: httpx.Response) -> bytes:
        try:
            return await response.aread()
        except (httpx.HTTPError, OSError) as e:
            raise TransportError(f'{type(e).__name__}: {e}') from e
