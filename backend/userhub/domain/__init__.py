"""Domain packages."""
