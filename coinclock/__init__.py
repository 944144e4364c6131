"""Cryptocurrency price ticker with an NTP-synchronised clock for the terminal."""

__version__ = "0.1.0"
__all__ = ["app", "display", "logo", "ntp", "price"]