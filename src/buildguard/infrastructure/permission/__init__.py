"""Permission evaluation."""
