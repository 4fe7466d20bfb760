"""Record store adapters."""
