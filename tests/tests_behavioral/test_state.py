from unittest.mock import MagicMock

import pytest

from behavioral.state import Context, StartState, State, StopState
from common.patterns import NotInitializedError
from common.utils import BufferWriter


def test_set_state_runs_behavior_immediately():
    writer = BufferWriter()
    context = Context()

    context.set_state(StartState(writer))
    context.set_state(StopState(writer))

    assert writer.lines == ["Стан: СТАРТ", "Стан: СТОП"]
    assert isinstance(context.state, StopState)

def test_any_state_may_follow_any_state():
    writer = BufferWriter()
    context = Context()

    context.set_state(StopState(writer))
    context.set_state(StopState(writer))
    context.set_state(StartState(writer))

    assert writer.lines == ["Стан: СТОП", "Стан: СТОП", "Стан: СТАРТ"]

def test_request_before_state_raises():
    context = Context()
    assert context.state is None
    with pytest.raises(NotInitializedError):
        context.request()

def test_request_reruns_current_state():
    state = MagicMock(spec=State)
    context = Context()

    context.set_state(state)
    context.request()

    assert state.handle.call_count == 2

def test_state_change_is_logged():
    logger = MagicMock()
    context = Context(logger)

    context.set_state(StartState(BufferWriter()))
    context.set_state(StopState(BufferWriter()))

    logger.log.assert_any_call("State change: None -> StartState")
    logger.log.assert_any_call("State change: StartState -> StopState")

def test_state_is_abstract():
    with pytest.raises(TypeError):
        State()
