"""Client for the Illumio PCE REST API and the resource models it returns."""

__version__ = "0.1.0"
__all__ = ["models", "pce"]