"""Cache application layer."""
