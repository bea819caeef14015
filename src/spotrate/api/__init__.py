"""HTTP adapter for the rate engine."""
