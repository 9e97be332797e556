"""Core building blocks shared across the bridge."""
