"""Resource read API."""
