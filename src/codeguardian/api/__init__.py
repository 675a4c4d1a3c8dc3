"""HTTP client and wire schemas for the scanning service."""
