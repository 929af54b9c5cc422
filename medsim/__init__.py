"""Simulated medical device firmware: sensor controllers on a cooperative task scheduler over emulated hardware."""

__version__ = "0.1.0"