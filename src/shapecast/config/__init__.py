"""Configuration for the shapecast CLI: settings, discovery, and logging."""
