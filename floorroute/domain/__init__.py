"""Domain layer: floor models, routes and heuristics."""
