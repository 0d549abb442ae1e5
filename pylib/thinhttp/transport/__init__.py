'''Transport and timer implementations. Swap via transport= / timer= client params.'''

from thinhttp.transport.base import AsyncioTimer, Timer, Transport
from thinhttp.transport.httpx_impl import HttpxTransport

__all__ = ['AsyncioTimer', 'HttpxTransport', 'Timer', 'Transport', 'get_transport']


def get_transport(kind: str = 'httpx', **kwargs) -> Transport:
    '''
    Factory for transports. kind: httpx (default).
    '''
    if kind == 'httpx':
        return HttpxTransport(**kwargs)
    raise ValueError(f'unknown transport: {kind}')
