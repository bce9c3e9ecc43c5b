"""Service layer — request resolution and image generation.

Services may import from domain, typography, layout, and render.
They must never import from commands, output, or web.
"""
