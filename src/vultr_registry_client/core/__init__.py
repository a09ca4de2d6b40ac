"""Core client components: configuration, transport, query encoding and pagination."""
