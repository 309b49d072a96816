"""PySide6 widgets for the grid editor."""
