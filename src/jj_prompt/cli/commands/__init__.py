"""Command implementations for the jj-prompt CLI."""
