"""HTTP transport for the Province Glow service."""
