"""
Padlock Cloud - account and subscription records.

This package provides:
- Accounts mirroring billing state from Stripe
- A key-value storage contract for persisting them
- Settings and structured logging
"""

__version__ = "1.0.0"


def get_version() -> str:
    """Get package version."""
    return __version__
