"""In-memory override store."""
