"""playpub - resolve Android release artifacts and publish them per application."""

__version__ = "0.3.0"
