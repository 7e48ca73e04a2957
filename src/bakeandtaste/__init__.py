"""Bake & Taste: cake marketplace domain."""
