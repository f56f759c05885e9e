"""Local persistence and derived metrics for a personal accountability tracker."""

__version__ = "0.1.0"
