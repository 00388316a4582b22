"""Error taxonomy for the carousel engine.

Two kinds of failure exist. ``ConfigurationError`` covers a carousel that
cannot be built (no items, invalid options); the ``Carousel`` facade catches
it and degrades to an inert instance. ``OutOfRangeError`` signals a Position
outside the padded sequence, which is a contract violation between the
layout and position modules and is never caught by the engine.

Example:
    from carousel_engine.core.errors import ConfigurationError, OutOfRangeError

    try:
        config = CarouselConfig.load(items_per_view=0)
    except ConfigurationError as ex:
        logger.warning("bad_config", error=str(ex), category=ex.category.name)
"""

from enum import Enum, auto


class ErrorCategory(Enum):
    """Classification of carousel errors."""

    CONFIGURATION = auto()  # Missing items or invalid options
    OUT_OF_RANGE = auto()  # Position outside the padded sequence


class CarouselError(Exception):
    """Base class for carousel engine errors.

    Attributes:
        category: The specific type of error.
        original_error: The underlying exception, if this error wraps one.
    """

    default_category = ErrorCategory.CONFIGURATION

    def __init__(
        self,
        message: str,
        category: ErrorCategory | None = None,
        original_error: Exception | None = None,
    ) -> None:
        super().__init__(message)
        self.category = category or self.default_category
        self.original_error = original_error


class ConfigurationError(CarouselError):
    """The carousel cannot be built from the supplied items or options."""

    default_category = ErrorCategory.CONFIGURATION

    @classmethod
    def from_exception(cls, ex: Exception) -> "ConfigurationError":
        """Create a ConfigurationError wrapping an existing exception."""
        return cls(message=str(ex), original_error=ex)


class OutOfRangeError(CarouselError):
    """A Position fell outside ``[0, padded_length)``.

    Attributes:
        position: The offending position.
        padded_length: Length of the padded sequence it was checked against.
    """

    default_category = ErrorCategory.OUT_OF_RANGE

    def __init__(
        self,
        position: int,
        padded_length: int,
        original_error: Exception | None = None,
    ) -> None:
        super().__init__(
            f"Position {position} outside padded sequence of length {padded_length}",
            original_error=original_error,
        )
        self.position = position
        self.padded_length = padded_length
