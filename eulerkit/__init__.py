"""Answers to Project Euler problems 1 to 50 and the number-theory helpers they share."""

__version__ = "0.1.0"