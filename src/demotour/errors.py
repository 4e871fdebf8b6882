"""Errors raised by demotour."""


class DemoTourError(Exception):
    """Base exception for demotour errors."""


class StepIndexError(DemoTourError, IndexError):
    """Raised when a step index falls outside the catalog."""

    def __init__(self, index: int, size: int) -> None:
        self.index = index
        self.size = size
        super().__init__(f"Step index {index} out of range for {size} step(s)")


class EmptyCatalogError(DemoTourError, ValueError):
    """Raised when a viewer is built over a catalog with no steps."""


class CatalogError(DemoTourError):
    """Raised when a step catalog cannot be loaded."""


class ConfigError(DemoTourError):
    """Raised when the configuration file cannot be loaded."""
