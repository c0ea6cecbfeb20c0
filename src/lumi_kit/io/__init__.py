"""I/O collaborators: text sources and sinks, user config, run records."""
