'''Fake transport and timer for driving the client deterministically.'''

import asyncio
import inspect

import httpx

from thinhttp.transport import Timer, Transport


class FakeTransport(Transport):
    '''Calls handler(request) for every send; handler may be sync or async.'''

    def __init__(self, handler, supports_cancellation: bool = True) -> None:
        self.handler = handler
        self.supports_cancellation = supports_cancellation
        self.requests: list[httpx.Request] = []
        self.follow_redirects: list[bool] = []
        self.failures: list[BaseException] = []
        self.responses: list[httpx.Response] = []
        self.cancelled = 0
        self.closed = False

    async def send(self, request: httpx.Request, *, follow_redirects: bool = True) -> httpx.Response:
        self.requests.append(request)
        self.follow_redirects.append(follow_redirects)
        try:
            result = self.handler(request)
            if inspect.isawaitable(result):
                result = await result
        except asyncio.CancelledError:
            self.cancelled += 1
            raise
        except Exception as e:
            self.failures.append(e)
            raise
        self.responses.append(result)
        return result

    async def aclose(self) -> None:
        self.closed = True

    @property
    def last_request(self) -> httpx.Request:
        return self.requests[-1]


class FakeHandle:
    def __init__(self, delay: float, callback) -> None:
        self.delay = delay
        self.callback = callback
        self.cancelled = False
        self.fired = False

    def cancel(self) -> None:
        self.cancelled = True


class FakeTimer(Timer):
    '''Timer that only fires when told to.'''

    def __init__(self) -> None:
        self.handles: list[FakeHandle] = []

    def call_later(self, delay, callback):
        handle = FakeHandle(delay, callback)
        self.handles.append(handle)
        return handle

    @property
    def pending(self) -> list[FakeHandle]:
        return [h for h in self.handles if not h.cancelled and not h.fired]

    def fire(self) -> None:
        for handle in self.pending:
            handle.fired = True
            handle.callback()


def respond(status: int = 200, content: bytes = b'', headers: dict | None = None):
    '''Handler returning a fixed response.'''

    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(status, headers=headers, stream=httpx.ByteStream(content), request=request)

    return handler


async def wait_for(predicate, attempts: int = 200) -> None:
    '''Yield to the event loop until predicate() holds.'''
    for _ in range(attempts):
        if predicate():
            return
        await asyncio.sleep(0)
    raise AssertionError('condition not reached')


class FailingStream(httpx.AsyncByteStream):
    '''Response body that breaks off while being read.'''

    def __init__(self) -> None:
        self.closed = False

    async def __aiter__(self):
        yield b'partial'
        raise httpx.ReadError('connection reset while reading body')

    async def aclose(self) -> None:
        self.closed = True
