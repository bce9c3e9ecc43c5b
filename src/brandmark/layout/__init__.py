"""Backend-agnostic placement math for banners and letter glyphs."""
