"""fortune2 — fortune cookie jars in SQLite, served from the CLI and over HTTP."""
