"""secconfig test package."""
