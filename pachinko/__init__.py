"""Pachinko game pieces: ball physics, pins, prize slot, lottery, reward lights, buttons and a title menu."""

__version__ = "0.1.0"