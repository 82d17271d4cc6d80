"""Static site generator for a Markdown blog."""
