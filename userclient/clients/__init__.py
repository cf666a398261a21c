"""HTTP transport used by the service façades."""
