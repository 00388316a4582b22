"""Carousel configuration.

Options are validated with pydantic. They can be built directly, or parsed
from markup-style ``data-*`` attributes the way the page layer supplies
them:

    config = CarouselConfig.from_attributes(
        {"data-multislider-items": "4", "data-multislider-gap": "16"}
    )
"""

import re
from collections.abc import Mapping
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError, model_validator

from carousel_engine.core.errors import ConfigurationError

DEFAULT_ATTRIBUTE_PREFIX = "multislider"

_LEADING_INT = re.compile(r"^\s*([+-]?\d+)")


def parse_int(value: str | None, fallback: int) -> int:
    """Parse the leading integer of an attribute value.

    Trailing units are ignored, so ``"20px"`` parses as 20. Anything without
    a leading integer falls back to ``fallback``.
    """
    if value is None:
        return fallback
    match = _LEADING_INT.match(value)
    if match is None:
        return fallback
    return int(match.group(1))


def parse_bool(value: str | None, fallback: bool = False) -> bool:
    """Only a case-insensitive ``"true"`` is truthy."""
    if value is None:
        return fallback
    return value.strip().lower() == "true"


class Breakpoints(BaseModel):
    """Viewport widths (px) at which items-per-view changes.

    Below ``medium_px`` the narrow count applies, below ``wide_px`` the
    medium count, otherwise the wide count.
    """

    medium_px: int = Field(768, ge=0)
    wide_px: int = Field(1024, ge=0)

    model_config = ConfigDict(frozen=True)

    @model_validator(mode="after")
    def _ordered(self) -> "Breakpoints":
        if self.wide_px < self.medium_px:
            raise ValueError("wide_px must not be smaller than medium_px")
        return self


class CarouselConfig(BaseModel):
    """Options recognized by the carousel engine."""

    items_per_view: int = Field(3, ge=1, description="Items visible on wide viewports")
    items_per_view_medium: int = Field(2, ge=1)
    items_per_view_narrow: int = Field(1, ge=1)
    gap_px: int = Field(20, ge=0)
    autoplay: bool = False
    interval_ms: int = Field(5000, gt=0)
    transition_duration_ms: int = Field(500, ge=0)
    pause_on_hover: bool = True
    keyboard: bool = True
    resize_debounce_ms: int = Field(250, ge=0)
    breakpoints: Breakpoints = Field(default_factory=Breakpoints)

    model_config = ConfigDict(
        frozen=True,
        json_schema_extra={
            "example": {
                "items_per_view": 4,
                "items_per_view_medium": 2,
                "items_per_view_narrow": 1,
                "gap_px": 20,
                "autoplay": True,
                "interval_ms": 3000,
            }
        },
    )

    @classmethod
    def load(cls, **options: Any) -> "CarouselConfig":
        """Validate options, raising ConfigurationError instead of ValidationError."""
        try:
            return cls(**options)
        except ValidationError as ex:
            raise ConfigurationError.from_exception(ex) from ex

    @classmethod
    def single(cls, **options: Any) -> "CarouselConfig":
        """Configuration for a one-item-per-view slider with no gap."""
        options.setdefault("gap_px", 0)
        return cls.load(
            items_per_view=1,
            items_per_view_medium=1,
            items_per_view_narrow=1,
            **options,
        )

    @classmethod
    def from_attributes(
        cls,
        attributes: Mapping[str, str],
        prefix: str = DEFAULT_ATTRIBUTE_PREFIX,
    ) -> "CarouselConfig":
        """Build a configuration from markup attributes.

        Keys may be given with or without the ``data-`` prefix, e.g.
        ``data-multislider-items`` or ``multislider-items``. Unparseable
        values fall back to the defaults; parseable but invalid values
        (such as ``"0"`` items) raise ConfigurationError.

        Args:
            attributes: Attribute name to raw string value.
            prefix: Component prefix used in the attribute names.

        Returns:
            The validated configuration.
        """

        def lookup(name: str) -> str | None:
            for key in (f"data-{prefix}-{name}", f"{prefix}-{name}"):
                if key in attributes:
                    return attributes[key]
            return None

        defaults = cls.model_fields
        return cls.load(
            items_per_view=parse_int(
                lookup("items"), defaults["items_per_view"].default
            ),
            items_per_view_medium=parse_int(
                lookup("items-md"), defaults["items_per_view_medium"].default
            ),
            items_per_view_narrow=parse_int(
                lookup("items-sm"), defaults["items_per_view_narrow"].default
            ),
            gap_px=parse_int(lookup("gap"), defaults["gap_px"].default),
            autoplay=parse_bool(lookup("autoplay")),
            interval_ms=parse_int(lookup("interval"), defaults["interval_ms"].default),
        )

    def items_per_view_for(self, viewport_width: float) -> int:
        """Items-per-view for the given viewport width."""
        if viewport_width < self.breakpoints.medium_px:
            return self.items_per_view_narrow
        if viewport_width < self.breakpoints.wide_px:
            return self.items_per_view_medium
        return self.items_per_view
