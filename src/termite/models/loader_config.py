"""Configuration models for progress indicators.

Each indicator family has one model with named, defaulted fields. The
models are validated with pydantic and built through
``termite.config.validator.build_config``, which turns validation failures
into ``InvalidArgumentError``.

Symbol lists default to fresh copies of the tuples in
``termite.config.defaults`` so no two indicators share one list.
"""

from pydantic import BaseModel, ConfigDict, Field, field_validator

from termite.config.defaults import (
    DEFAULT_CYCLIC_SYMBOLS,
    DEFAULT_FILLER,
    DEFAULT_LEFT_MARKER,
    DEFAULT_RIGHT_MARKER,
    DEFAULT_SPINNER_SYMBOLS,
    DEFAULT_UNITS,
    DEFAULT_VOID,
)


class StyleConfig(BaseModel):
    """SGR attributes shared by every indicator."""

    model_config = ConfigDict(extra="forbid")

    attributes: list[int] = Field(
        default_factory=list,
        description="SGR attribute codes applied when rendering",
    )

    @field_validator("attributes")
    @classmethod
    def validate_attributes(cls, v: list[int]) -> list[int]:
        """Reject negative SGR codes."""
        if any(code < 0 for code in v):
            raise ValueError("SGR attribute codes must be non-negative")
        return v


class PercentageConfig(StyleConfig):
    """Percentage loader configuration."""

    total_steps: int = Field(
        ..., gt=0, strict=True, description="Steps until 100%"
    )


class FrameConfig(StyleConfig):
    """A bar of fixed width bounded by two markers."""

    width_units: int = Field(
        DEFAULT_UNITS, gt=0, strict=True, description="Bar width in cells"
    )
    left_marker: str = Field(DEFAULT_LEFT_MARKER, description="Left bound")
    right_marker: str = Field(DEFAULT_RIGHT_MARKER, description="Right bound")
    void: str = Field(DEFAULT_VOID, min_length=1, description="Empty cell symbol")


class BarConfig(FrameConfig):
    """A frame filled from the left with a filler symbol."""

    filler: str = Field(DEFAULT_FILLER, min_length=1, description="Filled cell symbol")


class ProgressBarConfig(BarConfig):
    """Progress bar configuration."""

    total_steps: int = Field(
        ..., gt=0, strict=True, description="Steps until the bar is full"
    )


class OuroborosConfig(BarConfig):
    """Oscillating bar configuration."""


def _validate_symbols(v: list[str]) -> list[str]:
    if any(not symbol for symbol in v):
        raise ValueError("symbols must be non-empty strings")
    return v


class SpinnerConfig(StyleConfig):
    """Loading spinner configuration.

    Bold is always applied by the spinner; ``attributes`` holds extras.
    """

    symbols: list[str] = Field(
        default_factory=lambda: list(DEFAULT_SPINNER_SYMBOLS),
        min_length=1,
        description="Symbols cycled through, one per step",
    )

    @field_validator("symbols")
    @classmethod
    def validate_symbols(cls, v: list[str]) -> list[str]:
        """Ensure every symbol is a non-empty string."""
        return _validate_symbols(v)


class CyclicConfig(FrameConfig):
    """Cyclic loader configuration.

    Bold is always applied to the moving symbol; ``attributes`` holds extras.
    """

    symbols: list[str] = Field(
        default_factory=lambda: list(DEFAULT_CYCLIC_SYMBOLS),
        min_length=1,
        description="Symbols cycled through as the marker sweeps the bar",
    )

    @field_validator("symbols")
    @classmethod
    def validate_symbols(cls, v: list[str]) -> list[str]:
        """Ensure every symbol is a non-empty string."""
        return _validate_symbols(v)
