"""Social graph and feed backend."""
