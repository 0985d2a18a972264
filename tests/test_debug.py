import logging

import pytest

from connect4_search.debug import DebugLevel, DebugManager, LOGGER_NAME, debug


class TestDebugManager:
    def test_level_filtering(self):
        debug.configure(level=DebugLevel.INFO)
        assert debug.is_enabled_for(DebugLevel.ERROR)
        assert debug.is_enabled_for(DebugLevel.INFO)
        assert not debug.is_enabled_for(DebugLevel.DEBUG)
        assert not debug.is_enabled_for(DebugLevel.TRACE)

    def test_none_is_never_emitted(self):
        debug.configure(level=DebugLevel.TRACE)
        assert not debug.is_enabled_for(DebugLevel.NONE)

    def test_disabled(self):
        debug.configure(level=DebugLevel.TRACE, enabled=False)
        assert not debug.is_enabled_for(DebugLevel.ERROR)

    def test_component_filter(self):
        debug.configure(level=DebugLevel.DEBUG, components=["search"])
        assert debug.is_enabled_for(DebugLevel.DEBUG, "search")
        assert not debug.is_enabled_for(DebugLevel.DEBUG, "board")
        # untagged messages are not filtered by component
        assert debug.is_enabled_for(DebugLevel.DEBUG)

    def test_set_from_string(self):
        assert debug.set_from_string("TRACE") is True
        assert debug.level == DebugLevel.TRACE
        assert debug.set_from_string("loud") is False
        assert debug.level == DebugLevel.TRACE

    def test_timer(self):
        with debug.timer("unit") as timer:
            assert timer.elapsed is None
        assert timer.elapsed >= 0.0

    def test_timer_stops_on_error(self):
        with pytest.raises(RuntimeError):
            with debug.timer("unit") as timer:
                raise RuntimeError("boom")
        assert timer.elapsed is not None

    def test_log_file(self, tmp_path):
        log_file = tmp_path / "engine.log"
        debug.configure(level=DebugLevel.TRACE, log_file=str(log_file))
        debug.info("searching", "search")
        debug.trace("column 3 is full", "board")
        debug.configure(log_file="")

        text = log_file.read_text()
        assert "[search] searching" in text
        assert "TRACE: [board] column 3 is full" in text
        assert not any(isinstance(h, logging.FileHandler) for h in debug.logger.handlers)

    def test_managers_share_one_console_handler(self):
        logger = logging.getLogger(LOGGER_NAME)
        before = len(logger.handlers)
        DebugManager()
        DebugManager()
        assert len(logger.handlers) == before
        assert sum(1 for h in logger.handlers if type(h) is logging.StreamHandler) == 1
