"""Qt user interface layer for dragreorder."""
