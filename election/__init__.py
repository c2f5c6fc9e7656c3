"""In-memory election simulator: voter and party registries, a voting window, and tallies."""
