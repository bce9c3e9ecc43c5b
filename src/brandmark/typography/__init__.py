"""Typography layer — fonts, text metrics, glyph run plans, and fitting.

Depends on the domain layer and Pillow. Knows nothing about canvases.
"""
