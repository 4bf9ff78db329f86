"""Request-scoped state for multi-step tool creation."""
