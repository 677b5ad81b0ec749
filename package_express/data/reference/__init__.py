"""Package Express reference data: limits and pricing configuration."""
