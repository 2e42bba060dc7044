"""Weekly route assignment."""
