"""Click commands for the revise CLI."""
