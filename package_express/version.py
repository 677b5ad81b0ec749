"""Package Express quote calculator version."""

VERSION = "2025.1.0"
