"""Starline - a one-lane arcade shooter over a parallax starfield."""

__version__ = "0.1.0"
