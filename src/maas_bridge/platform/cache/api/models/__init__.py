"""Cache API models."""
