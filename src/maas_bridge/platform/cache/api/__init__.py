"""Cache admin HTTP API."""
