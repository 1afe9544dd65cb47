"""PyQt6 surface: a playable board, the move entry and the pointer executor."""
