'''
Error taxonomy for thinhttp.

- ConfigurationError: raised from construction / URL reassignment
- TransportError (and RequestTimeoutError): caught by HttpClient.request, returned as envelope body
- HttpStatusError: never raised by the client; returned as envelope body
- DecodeError: raised from the JSON receive step and left to propagate
'''


class ThinHttpError(Exception):
    '''Base class for all thinhttp errors.'''


class ConfigurationError(ThinHttpError, ValueError):
    '''Raised when a URL is not an HTTP client compatible resource.'''


class TransportError(ThinHttpError):
    '''Network failure or aborted send.'''


class RequestTimeoutError(TransportError):
    '''The send did not complete within the client timeout.'''

    def __init__(self, message: str = 'Timeout occurred', timeout: float | None = None) -> None:
        super().__init__(message)
        self.timeout = timeout


class HttpStatusError(ThinHttpError):
    '''A completed response with a non-ok status.'''

    def __init__(self, status_code: int, reason: str = '') -> None:
        message = f'{status_code} {reason}'.strip()
        super().__init__(message)
        self.status_code = status_code
        self.reason = reason


class DecodeError(ThinHttpError, ValueError):
    '''Response claimed to be JSON but the body could not be decoded.'''

    def __init__(self, message: str, content: bytes = b'') -> None:
        super().__init__(message)
        self.content = content
