"""Infrastructure layer: logging and other technical concerns."""
