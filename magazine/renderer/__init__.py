"""Renderers HTML — rich text, blocs custom, pages."""
