"""Tests for the carousel error taxonomy."""

from carousel_engine.core.errors import (
    CarouselError,
    ConfigurationError,
    ErrorCategory,
    OutOfRangeError,
)


class TestErrorCategory:
    """Tests for ErrorCategory enum."""

    def test_all_categories_defined(self) -> None:
        assert ErrorCategory.CONFIGURATION
        assert ErrorCategory.OUT_OF_RANGE


class TestConfigurationError:
    """Tests for ConfigurationError class."""

    def test_default_category(self) -> None:
        error = ConfigurationError("no items")
        assert error.category == ErrorCategory.CONFIGURATION
        assert str(error) == "no items"
        assert error.original_error is None

    def test_from_exception(self) -> None:
        """Should wrap the original exception and keep its message."""
        original = ValueError("bad gap")
        error = ConfigurationError.from_exception(original)
        assert isinstance(error, CarouselError)
        assert error.original_error is original
        assert str(error) == "bad gap"


class TestOutOfRangeError:
    """Tests for OutOfRangeError class."""

    def test_attributes(self) -> None:
        error = OutOfRangeError(position=12, padded_length=12)
        assert error.category == ErrorCategory.OUT_OF_RANGE
        assert error.position == 12
        assert error.padded_length == 12
        assert "12" in str(error)

    def test_is_carousel_error(self) -> None:
        assert isinstance(OutOfRangeError(-1, 4), CarouselError)
