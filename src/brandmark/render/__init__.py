"""Renderers — paint placements onto a Pillow image or into SVG markup.

Both renderers consume the same :mod:`brandmark.layout.placement` output.
"""
