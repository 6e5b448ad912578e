"""Domain layer: models and errors for project deletion."""
