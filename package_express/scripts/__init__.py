"""Package Express command-line tools."""
