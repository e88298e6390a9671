"""Built-in persona instructions, one Markdown file per pipeline stage."""
