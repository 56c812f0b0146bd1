"""Settings, port validation and logging setup."""
