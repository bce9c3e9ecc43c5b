"""HTTP surface — FastAPI app and the preview page."""
