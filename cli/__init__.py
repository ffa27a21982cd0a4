"""docsync command-line interface."""
