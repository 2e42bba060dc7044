"""Account data access."""
