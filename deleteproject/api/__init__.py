"""HTTP API for project deletion."""
