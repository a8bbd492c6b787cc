"""Infrastructure layer — contract files and the taxonomy registry."""
