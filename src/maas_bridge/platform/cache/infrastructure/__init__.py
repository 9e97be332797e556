"""Cache infrastructure: in-process strategy implementations."""
