"""Tests for logging configuration, hooks, and unwrap tracing."""

from __future__ import annotations

from typing import Any

import pytest

from klaw_option import AbsentValueError, Nothing, Some, init
from klaw_option._logging import (
    ABSENT_UNWRAP_EVENT,
    LOGGER_NAME,
    add_log_hook,
    clear_log_hooks,
    configure_logging,
    get_logger,
    remove_log_hook,
)


def _capture() -> list[dict[str, Any]]:
    received: list[dict[str, Any]] = []
    add_log_hook(received.append)
    return received


class TestLogHooks:
    """Tests for logging hooks functionality."""

    def test_hook_receives_log_events(self) -> None:
        """Registered hooks receive log entry dicts."""
        configure_logging(level='DEBUG', json_output=True)
        received = _capture()

        get_logger('test').info('Test message', extra_field='extra_value')

        entries = [e for e in received if e.get('event') == 'Test message']
        assert len(entries) == 1
        assert entries[0]['extra_field'] == 'extra_value'

    def test_remove_hook(self) -> None:
        """remove_log_hook() stops hook from being called."""
        calls: list[str] = []

        def hook(event_dict: dict[str, Any]) -> None:
            calls.append('called')

        configure_logging(level='DEBUG', json_output=True)
        add_log_hook(hook)
        logger = get_logger('test')
        logger.info('First')
        assert len(calls) == 1

        remove_log_hook(hook)
        logger.info('Second')
        assert len(calls) == 1

    def test_clear_hooks(self) -> None:
        calls: list[str] = []
        add_log_hook(lambda e: calls.append('a'))
        add_log_hook(lambda e: calls.append('b'))
        clear_log_hooks()

        configure_logging(level='DEBUG', json_output=True)
        get_logger('test').info('Test')
        assert calls == []

    def test_failing_hook_does_not_break_logging(self) -> None:
        received: list[dict[str, Any]] = []

        def broken(event_dict: dict[str, Any]) -> None:
            raise RuntimeError('hook failure')

        configure_logging(level='DEBUG', json_output=False)
        add_log_hook(broken)
        add_log_hook(received.append)

        get_logger('test').warning('still logged')
        assert any(e.get('event') == 'still logged' for e in received)


class TestUnwrapTracing:
    """Tests for the absent_unwrap trace event."""

    def test_trace_emits_event_before_raising(self) -> None:
        init(log_level='DEBUG', trace_unwraps=True)
        received = _capture()

        with pytest.raises(AbsentValueError):
            Nothing.unwrap('no user')

        events = [e for e in received if e.get('event') == 'absent_unwrap']
        assert len(events) == 1
        assert events[0]['operation'] == 'unwrap'
        assert events[0]['error_type'] == 'AbsentValueError'
        assert events[0]['detail'] == 'Cannot unwrap Nothing. no user'

    def test_trace_records_custom_error_type(self) -> None:
        init(log_level='DEBUG', trace_unwraps=True)
        received = _capture()

        with pytest.raises(KeyError):
            Nothing.raise_if_none(lambda: KeyError('user'))

        events = [e for e in received if e.get('event') == 'absent_unwrap']
        assert events[0]['operation'] == 'raise_if_none'
        assert events[0]['error_type'] == 'KeyError'

    def test_no_event_when_tracing_disabled(self) -> None:
        init(log_level='DEBUG', trace_unwraps=False)
        received = _capture()

        with pytest.raises(AbsentValueError):
            Nothing.expect('missing')

        assert not [e for e in received if e.get('event') == 'absent_unwrap']

    def test_no_event_for_some(self) -> None:
        init(log_level='DEBUG', trace_unwraps=True)
        received = _capture()

        assert Some(1).unwrap() == 1
        assert not [e for e in received if e.get('event') == 'absent_unwrap']

    def test_event_schema(self) -> None:
        """absent_unwrap is a warning on the klaw_option logger with the documented fields."""
        init(log_level='DEBUG', trace_unwraps=True)
        received = _capture()

        with pytest.raises(AbsentValueError):
            Nothing.expect('gone')

        (event,) = [e for e in received if e.get('event') == ABSENT_UNWRAP_EVENT]
        assert event['logger'] == LOGGER_NAME
        assert event['level'] == 'warning'
        assert event['operation'] == 'expect'
        assert event['detail'] == 'Cannot unwrap Nothing. gone'

    def test_rendering_follows_latest_configuration(self, capsys) -> None:
        """Switching json_output after a traced unwrap changes how the next one renders."""
        init(log_level='DEBUG', json_output=True, trace_unwraps=True)
        with pytest.raises(AbsentValueError):
            Nothing.unwrap()
        assert '"event": "absent_unwrap"' in capsys.readouterr().err

        init(log_level='DEBUG', json_output=False, trace_unwraps=True)
        with pytest.raises(AbsentValueError):
            Nothing.unwrap()
        err = capsys.readouterr().err
        assert 'absent_unwrap' in err
        assert '"event": "absent_unwrap"' not in err


class TestGetLogger:
    """Tests for get_logger."""

    def test_default_name(self) -> None:
        """Loggers default to the klaw_option name."""
        configure_logging(level='DEBUG')
        received = _capture()

        get_logger().info('hello')

        (event,) = [e for e in received if e.get('event') == 'hello']
        assert event['logger'] == LOGGER_NAME

    def test_bound_context(self) -> None:
        """Keyword context is attached to every event of the returned logger."""
        configure_logging(level='DEBUG')
        received = _capture()

        logger = get_logger('test', operation='get_key')
        logger.info('first')
        logger.info('second')

        events = [e for e in received if e.get('event') in ('first', 'second')]
        assert [e['operation'] for e in events] == ['get_key', 'get_key']
