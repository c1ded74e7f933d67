"""Infrastructure shared by the engine and the CLI."""
