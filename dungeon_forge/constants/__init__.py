"""Fixed algorithm constants."""
