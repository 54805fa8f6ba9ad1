"""Built-in observers shipped with quickex."""
