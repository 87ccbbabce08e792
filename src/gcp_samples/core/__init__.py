"""Core utilities: configuration, logging, exceptions and resource names."""
