'''
Client settings. Defaults, overridable from env vars and an optional .env file.

THINHTTP_TIMEOUT: seconds; 0 disables the timeout race (default 30)
THINHTTP_FOLLOW_REDIRECTS: 1/0 (default 1)
THINHTTP_VERIFY: 1/0, TLS certificate verification (default 1)
THINHTTP_CHARSET: charset advertised on JSON request bodies (default: locale preferred encoding)
'''

from __future__ import annotations

import codecs
import locale
import os
from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path

from dotenv import dotenv_values

DEFAULT_TIMEOUT = 30.0

_TRUE_VALUES = {'1', 'true', 'yes', 'on'}
_FALSE_VALUES = {'0', 'false', 'no', 'off', ''}


def _parse_bool(name: str, raw: str) -> bool:
    value = raw.strip().lower()
    if value in _TRUE_VALUES:
        return True
    if value in _FALSE_VALUES:
        return False
    raise ValueError(f'{name} must be a boolean flag, got {raw!r}')


def normalize_charset(name: str | None) -> str | None:
    '''Canonical codec name for name (e.g. 'UTF8' -> 'utf-8'), or None if unknown.'''
    if not name:
        return None
    try:
        return codecs.lookup(name).name
    except LookupError:
        return None


def detect_charset() -> str | None:
    '''Character set of the host environment, if one can be determined.'''
    return normalize_charset(locale.getpreferredencoding(False))


@dataclass
class HttpSettings:
    '''Defaults applied to clients that are not given explicit values.'''

    timeout: float = DEFAULT_TIMEOUT
    follow_redirects: bool = True
    verify: bool = True
    charset: str | None = None

    @classmethod
    def from_env(
        cls,
        env_file: Path | None = None,
        environ: Mapping[str, str] | None = None,
    ) -> HttpSettings:
        '''
        Build settings from env vars. Values in env_file (dotenv format) are used
        only where the process environment does not set them.
        '''
        values: dict[str, str] = {}
        if env_file is not None and env_file.exists():
            values.update({k: v for k, v in dotenv_values(env_file).items() if v is not None})
        values.update(os.environ if environ is None else environ)

        timeout_raw = values.get('THINHTTP_TIMEOUT')
        try:
            timeout = float(timeout_raw) if timeout_raw not in (None, '') else DEFAULT_TIMEOUT
        except ValueError as e:
            raise ValueError(f'THINHTTP_TIMEOUT must be a number of seconds, got {timeout_raw!r}') from e
        if timeout < 0:
            raise ValueError(f'THINHTTP_TIMEOUT must not be negative, got {timeout_raw!r}')

        follow = values.get('THINHTTP_FOLLOW_REDIRECTS')
        verify = values.get('THINHTTP_VERIFY')
        charset = values.get('THINHTTP_CHARSET')
        return cls(
            timeout=timeout,
            follow_redirects=_parse_bool('THINHTTP_FOLLOW_REDIRECTS', follow) if follow is not None else True,
            verify=_parse_bool('THINHTTP_VERIFY', verify) if verify is not None else True,
            charset=normalize_charset(charset) if charset else None,
        )

    def effective_charset(self) -> str | None:
        '''Configured charset, falling back to the detected one.'''
        return self.charset or detect_charset()
