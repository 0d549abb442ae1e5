import pytest

from fakes import FakeTimer
from thinhttp.settings import HttpSettings


@pytest.fixture
def settings():
    '''Fixed settings so tests do not depend on THINHTTP_* in the environment.'''
    return HttpSettings(timeout=30.0, follow_redirects=True, verify=True, charset='utf-8')


@pytest.fixture
def timer():
    return FakeTimer()
