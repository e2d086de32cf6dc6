"""Override administration use cases."""
