"""QuickPOS point-of-sale transaction core."""

__version__ = "1.0.0"
