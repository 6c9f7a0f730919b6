"""Convert traditional Javadoc comments into Markdown documentation comments."""
