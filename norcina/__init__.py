"""Rubik's cube modelling, scrambling and solving, with solve records and a timer state machine."""

__version__ = "0.1.0"