"""Click building blocks shared by the CLI."""
