"""fortune2 command-line interface."""
