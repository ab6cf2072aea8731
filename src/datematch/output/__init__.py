"""Output layer — Rich and JSON rendering for the CLI."""
