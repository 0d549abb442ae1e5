'''Injected capabilities for the client: send a request, schedule a single-fire timer.'''

import asyncio
from abc import ABC, abstractmethod
from collections.abc import Callable

import httpx


class Transport(ABC):
    '''Sends a prepared request and returns the unread (streamed) response.'''

    # True if cancelling the task running send() aborts the in-flight request.
    # When False, a timed out send is left to finish and its result is dropped.
    supports_cancellation: bool = True

    @abstractmethod
    async def send(self, request: httpx.Request, *, follow_redirects: bool = True) -> httpx.Response:
        '''
        Send request. The returned response body must not have been read yet;
        the caller reads or closes it exactly once.
        '''

    @abstractmethod
    async def aclose(self) -> None:
        '''Release any resources held by the transport.'''


class Timer(ABC):
    '''Schedules callbacks after a delay. Handles returned must support cancel().'''

    @abstractmethod
    def call_later(self, delay: float, callback: Callable[[], None]) -> asyncio.Handle:
        '''Run callback once after delay seconds.'''


class AsyncioTimer(Timer):
    '''Timer backed by the running event loop.'''

    def call_later(self, delay: float, callback: Callable[[], None]) -> asyncio.Handle:
        return asyncio.get_running_loop().call_later(delay, callback)
