"""knf test package."""
