'''httpx-backed transport.'''

import httpx

from thinhttp.transport.base import Transport


class HttpxTransport(Transport):
    '''Sends through an httpx.AsyncClient. Responses are streamed, body unread.'''

    supports_cancellation = True

    def __init__(
        self,
        client: httpx.AsyncClient | None = None,
        *,
        verify: bool = True,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        '''
        client: use an existing AsyncClient (not closed by aclose)
        verify: TLS certificate verification when creating our own client
        transport: low-level httpx transport for our own client (e.g. httpx.MockTransport)
        '''
        self._owns_client = client is None
        # Timeouts are enforced by the caller's race, not by httpx
        self._client = client or httpx.AsyncClient(verify=verify, transport=transport, timeout=None)

    async def send(self, request: httpx.Request, *, follow_redirects: bool = True) -> httpx.Response:
        return await self._client.send(request, stream=True, follow_redirects=follow_redirects)

    async def aclose(self) -> None:
        if self._owns_client:
            await self._client.aclose()
