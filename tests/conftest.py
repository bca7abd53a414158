import logging

import pytest

from byterange.http import PartialContentSettings


@pytest.fixture(scope='function')
def data():
    return bytes(i % 256 for i in range(1000))


@pytest.fixture(scope='function')
def settings():
    return PartialContentSettings(content_type='text/plain')


@pytest.fixture(autouse=True)
def reset_loggers():
    yield
    for name in ('byterange', 'byterange.access'):
        log = logging.getLogger(name)
        log.handlers.clear()
        log.setLevel(logging.NOTSET)
        log.propagate = True
