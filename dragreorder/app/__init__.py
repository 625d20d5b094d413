"""Application layer: ports the reorder engine talks to."""
