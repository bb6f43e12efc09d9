from unittest.mock import MagicMock

import pytest

from behavioral.chain import AuthHandler, Handler, LogHandler
from common.utils import BufferWriter


@pytest.fixture
def writer():
    return BufferWriter()

@pytest.fixture
def chain(writer):
    auth = AuthHandler(writer)
    auth.set_next(LogHandler(writer))
    return auth


def test_set_next_links_and_returns_handler(writer):
    auth = AuthHandler(writer)
    log = LogHandler(writer)

    assert auth.set_next(log) is log
    assert auth.next is log
    assert log.next is None

def test_first_handler_consumes_its_request(chain, writer):
    chain.handle("auth")
    assert writer.lines == ["AuthHandler обробив запит"]

def test_request_forwarded_to_matching_handler(chain, writer):
    chain.handle("log")
    assert writer.lines == ["LogHandler обробив запит"]

def test_unmatched_request_is_dropped_silently(chain, writer):
    chain.handle("other")
    assert writer.lines == []

def test_single_handler_without_next_drops_request(writer):
    LogHandler(writer).handle("auth")
    assert writer.lines == []

def test_unhandled_request_is_logged_at_end_of_chain(writer):
    logger = MagicMock()
    auth = AuthHandler(writer, logger)
    auth.set_next(LogHandler(writer, logger))

    auth.handle("other")

    logger.log.assert_called_once_with("Request 'other' reached end of chain unhandled")

def test_only_first_match_handles_regardless_of_chain_length(writer):
    head = AuthHandler(writer)
    head.set_next(LogHandler(writer)).set_next(LogHandler(writer)).set_next(AuthHandler(writer))

    head.handle("log")
    head.handle("auth")

    assert writer.lines == ["LogHandler обробив запит", "AuthHandler обробив запит"]

def test_handler_is_abstract():
    with pytest.raises(TypeError):
        Handler()
