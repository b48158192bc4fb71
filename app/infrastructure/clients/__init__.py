"""Client interfaces for external systems."""
