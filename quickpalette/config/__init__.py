"""Configuration for quickpalette: constants and persisted UI preferences."""
