"""Infrastructure layer: I/O adapters, repositories and logging."""
