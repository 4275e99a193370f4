# src/plaintask/__init__.py

"""Plain-text command-line task tracker."""

__version__ = "0.3.0"
