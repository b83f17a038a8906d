"""Directory service for login identity records."""
