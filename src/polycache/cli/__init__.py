"""polycache command-line interface."""
