"""Transfer engine: validation and currency-conversion resolution for inter-account transfers."""

__version__ = "0.1.0"
