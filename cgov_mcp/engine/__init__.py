"""Document search engine and tool handlers."""
