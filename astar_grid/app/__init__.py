"""Grid editing collaborator and its Qt controller."""
