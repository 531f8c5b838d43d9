from __future__ import annotations

import io
import pytest
import logging
from typing import Generator
from unittest.mock import patch

from tfmcompat.utils.logger import (
    ColoredFormatter,
    setup_logging,
    get_logger,
    is_logging_configured,
    disable_logging,
)


@pytest.fixture
def clean_logger_state() -> Generator[None, None, None]:
    """Clean up logger state before and after each test.

    Yields:
        None
    """
    root_logger = logging.getLogger("tfmcompat")
    root_logger.handlers.clear()
    root_logger.setLevel(logging.NOTSET)

    import tfmcompat.utils.logger as logger_module

    logger_module._logging_configured = False

    yield

    root_logger.handlers.clear()
    root_logger.setLevel(logging.NOTSET)
    root_logger.propagate = True
    logger_module._logging_configured = False


@pytest.fixture
def captured_stream() -> io.StringIO:
    """Provide a StringIO stream for capturing log output."""
    return io.StringIO()


def _record(level: int = logging.INFO, msg: str = "hello") -> logging.LogRecord:
    return logging.LogRecord(
        name="tfmcompat.test",
        level=level,
        pathname=__file__,
        lineno=1,
        msg=msg,
        args=(),
        exc_info=None,
    )


@pytest.mark.unit
class TestColoredFormatter:
    """Tests for ColoredFormatter."""

    def test_plain_output_without_color(self) -> None:
        """Test no ANSI codes are emitted when color is disabled."""
        formatter = ColoredFormatter("%(levelname)s: %(message)s", use_color=False)

        assert formatter.format(_record()) == "INFO: hello"

    def test_color_applied_when_supported(self) -> None:
        """Test level names are wrapped in color codes on a color terminal."""
        formatter = ColoredFormatter("%(levelname)s: %(message)s", use_color=True)

        with patch.object(ColoredFormatter, "_should_use_color", return_value=True):
            output = formatter.format(_record(logging.ERROR))

        assert output.startswith(ColoredFormatter.COLORS["ERROR"])
        assert ColoredFormatter.RESET in output

    def test_levelname_restored(self) -> None:
        """Test the record's level name is left untouched for other handlers."""
        formatter = ColoredFormatter("%(levelname)s: %(message)s", use_color=True)
        record = _record(logging.WARNING)

        with patch.object(ColoredFormatter, "_should_use_color", return_value=True):
            formatter.format(record)

        assert record.levelname == "WARNING"

    def test_no_color_env_disables_color(self) -> None:
        """Test NO_COLOR turns color detection off."""
        with patch.dict("os.environ", {"NO_COLOR": "1"}):
            assert ColoredFormatter._should_use_color() is False

    def test_ci_env_disables_color(self) -> None:
        """Test CI turns color detection off."""
        with patch.dict("os.environ", {"CI": "true"}, clear=True):
            assert ColoredFormatter._should_use_color() is False


@pytest.mark.unit
class TestSetupLogging:
    """Tests for setup_logging."""

    def test_writes_to_stream(
        self, clean_logger_state: None, captured_stream: io.StringIO
    ) -> None:
        """Test messages reach the configured stream."""
        setup_logging(level=logging.INFO, stream=captured_stream)

        get_logger("parser").info("parsed")

        assert "parsed" in captured_stream.getvalue()

    def test_level_by_name(
        self, clean_logger_state: None, captured_stream: io.StringIO
    ) -> None:
        """Test levels may be given by name."""
        setup_logging(level="debug", stream=captured_stream)

        get_logger("reducer").debug("nearest")

        assert "nearest" in captured_stream.getvalue()
        assert logging.getLogger("tfmcompat").level == logging.DEBUG

    def test_filters_below_level(
        self, clean_logger_state: None, captured_stream: io.StringIO
    ) -> None:
        """Test messages below the level are dropped."""
        setup_logging(level=logging.WARNING, stream=captured_stream)

        get_logger("reducer").info("hidden")

        assert captured_stream.getvalue() == ""

    def test_unknown_level_raises(self, clean_logger_state: None) -> None:
        """Test an unknown level name is rejected."""
        with pytest.raises(ValueError):
            setup_logging(level="chatty")

    def test_repeated_setup_keeps_single_handler(
        self, clean_logger_state: None, captured_stream: io.StringIO
    ) -> None:
        """Test calling setup twice replaces the handler."""
        setup_logging(stream=captured_stream)
        setup_logging(stream=captured_stream)

        assert len(logging.getLogger("tfmcompat").handlers) == 1

    def test_verbose_format_includes_logger_name(
        self, clean_logger_state: None, captured_stream: io.StringIO
    ) -> None:
        """Test verbose output names the logger."""
        setup_logging(verbose=True, stream=captured_stream)

        get_logger("config").info("loaded")

        assert "tfmcompat.config" in captured_stream.getvalue()

    def test_marks_configured(self, clean_logger_state: None) -> None:
        """Test setup flips the configured flag."""
        assert is_logging_configured() is False

        setup_logging(stream=io.StringIO())

        assert is_logging_configured() is True


@pytest.mark.unit
class TestGetLogger:
    """Tests for get_logger."""

    def test_relative_name_is_namespaced(self) -> None:
        """Test relative names land under tfmcompat."""
        assert get_logger("parser").name == "tfmcompat.parser"

    def test_qualified_name_kept(self) -> None:
        """Test already qualified names are not prefixed twice."""
        assert get_logger("tfmcompat.core").name == "tfmcompat.core"

    def test_default_is_root(self) -> None:
        """Test no name returns the package root logger."""
        assert get_logger().name == "tfmcompat"
        assert get_logger("tfmcompat").name == "tfmcompat"


@pytest.mark.unit
class TestDisableLogging:
    """Tests for disable_logging."""

    def test_silences_output(
        self, clean_logger_state: None, captured_stream: io.StringIO
    ) -> None:
        """Test nothing is written after logging is disabled."""
        setup_logging(stream=captured_stream)
        disable_logging()

        get_logger("parser").warning("silenced")

        assert captured_stream.getvalue() == ""
        assert is_logging_configured() is False
