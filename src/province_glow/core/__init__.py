"""Core configuration for Province Glow."""
