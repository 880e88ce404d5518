"""Core: configuration, schema, exceptions and run logging."""
