"""secconfig API package."""
