"""Toy Indian stock-market domain model with a console walkthrough."""

__version__ = "0.1.0"
