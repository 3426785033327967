"""Version information for lint-settings."""
__version__ = "0.1.0"
