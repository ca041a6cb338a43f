"""Field schedule service package."""
