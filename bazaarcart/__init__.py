"""Grocery shopping cart with multi-currency bank account checkout and a console session."""

__version__ = "0.1.0"