"""Catch falling treats with a corgi: a small pygame arcade game."""

__version__ = "1.0.0"