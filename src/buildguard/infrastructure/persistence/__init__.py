"""Override persistence."""
