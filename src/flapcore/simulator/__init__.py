"""Desktop simulator (requires the ``simulator`` extra)."""
