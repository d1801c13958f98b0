"""Interactive console parking lot system with tickets, payments, subscribers and an admin panel."""

__version__ = "0.1.0"
__all__ = ["__version__"]