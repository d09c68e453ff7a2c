"""metagen services."""
