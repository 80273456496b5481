"""Local task tracking: repository, persistence adapter and view projections."""

__version__ = "0.1.0"
