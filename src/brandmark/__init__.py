"""brandmark — domain banner, logo, and favicon generator."""

__version__ = "0.1.0"
