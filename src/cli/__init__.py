"""Command-line interface for the contact book: config, prompt, presentation, dispatch."""
