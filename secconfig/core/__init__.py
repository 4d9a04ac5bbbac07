"""secconfig configuration models package."""
