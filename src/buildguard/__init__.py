"""buildguard - role-based permission engine for construction management."""

__version__ = "0.1.0"
