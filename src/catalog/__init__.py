"""Product catalog web application."""

__version__ = "0.1.0"
