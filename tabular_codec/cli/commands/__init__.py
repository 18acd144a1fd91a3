"""Click commands of the tabular-codec CLI."""
