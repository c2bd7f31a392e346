"""Domain model, persistence and errors for gottodo."""
