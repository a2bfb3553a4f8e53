"""Output layer: report models and text/JSON formatting for the CLI."""
