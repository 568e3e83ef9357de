"""Gallery backend."""
