"""poststore CLI package."""
