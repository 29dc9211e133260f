"""Map, node and timing primitives."""
