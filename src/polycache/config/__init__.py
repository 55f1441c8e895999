"""polycache configuration properties."""
