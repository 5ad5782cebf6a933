"""PyQt6 render and input bridge."""
