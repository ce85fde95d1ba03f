"""Runtime layer: HTTP transport and pagination."""
