"""Data models for termite."""

from termite.models.loader_config import (
    BarConfig,
    CyclicConfig,
    FrameConfig,
    OuroborosConfig,
    PercentageConfig,
    ProgressBarConfig,
    SpinnerConfig,
    StyleConfig,
)

__all__ = [
    "BarConfig",
    "CyclicConfig",
    "FrameConfig",
    "OuroborosConfig",
    "PercentageConfig",
    "ProgressBarConfig",
    "SpinnerConfig",
    "StyleConfig",
]
