"""Data layer: JSON definitions and the balance configuration."""
