"""Domain layer — host parsing, palettes, themes.

This layer depends only on stdlib and pydantic.
It must never import from typography, layout, render, services, or web.
"""
