"""Quadratic and linear equation solver with a console front end and self-tests."""

__version__ = "0.1.0"