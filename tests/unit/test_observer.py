"""Unit tests for loanbook.parser.observer — diagnostic sinks."""
from __future__ import annotations

import logging

import pytest

from loanbook.parser.dispatcher import CommandDispatcher
from loanbook.parser.errors import UnknownCommandError
from loanbook.parser.observer import LoggingObserver, NullObserver, ParseObserver


class TestProtocol:
    def test_logging_observer_satisfies_protocol(self) -> None:
        assert isinstance(LoggingObserver(), ParseObserver)

    def test_null_observer_satisfies_protocol(self) -> None:
        assert isinstance(NullObserver(), ParseObserver)

    def test_plain_object_does_not_satisfy_protocol(self) -> None:
        assert not isinstance(object(), ParseObserver)


class TestLoggingObserver:
    def test_split_logged_at_debug(self, caplog: pytest.LogCaptureFixture) -> None:
        observer = LoggingObserver()
        with caplog.at_level(logging.DEBUG, logger="loanbook.parser.observer"):
            observer.on_split("find", " alice")
        assert caplog.records[0].levelno == logging.DEBUG
        assert "Command word: 'find'; Arguments: ' alice'" in caplog.text

    def test_failure_logs_raw_input(self, caplog: pytest.LogCaptureFixture) -> None:
        observer = LoggingObserver()
        with caplog.at_level(logging.DEBUG, logger="loanbook.parser.observer"):
            observer.on_failure("frobnicate 1", UnknownCommandError("frobnicate"))
        assert "UnknownCommandError" in caplog.text
        assert "'frobnicate 1'" in caplog.text

    def test_custom_logger(self, caplog: pytest.LogCaptureFixture) -> None:
        observer = LoggingObserver(logging.getLogger("myapp.parser"))
        with caplog.at_level(logging.DEBUG, logger="myapp.parser"):
            observer.on_split("help", "")
        assert caplog.records[0].name == "myapp.parser"

    def test_nothing_logged_above_debug(self, caplog: pytest.LogCaptureFixture) -> None:
        observer = LoggingObserver()
        with caplog.at_level(logging.INFO, logger="loanbook.parser.observer"):
            observer.on_split("find", " alice")
        assert caplog.records == []

    def test_default_dispatcher_logs_through_observer(self, caplog: pytest.LogCaptureFixture) -> None:
        dispatcher = CommandDispatcher()
        with caplog.at_level(logging.DEBUG, logger="loanbook.parser.observer"):
            with pytest.raises(UnknownCommandError):
                dispatcher.parse_command("frobnicate 123")
        assert "Command word: 'frobnicate'" in caplog.text
        assert "'frobnicate 123'" in caplog.text


class TestNullObserver:
    def test_dispatcher_with_null_observer_logs_nothing(self, caplog: pytest.LogCaptureFixture) -> None:
        dispatcher = CommandDispatcher(observer=NullObserver())
        with caplog.at_level(logging.DEBUG):
            dispatcher.parse_command("help")
            with pytest.raises(UnknownCommandError):
                dispatcher.parse_command("nope")
        assert not [r for r in caplog.records if r.name.startswith("loanbook.parser.observer")]
