"""Command-line interface for closestmatch."""
