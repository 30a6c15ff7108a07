"""Qt user interface components."""
