"""Source provider: fetching, validation and markup stripping."""
