"""Phone-number verification-code authentication service."""

__version__ = "1.0.0"
