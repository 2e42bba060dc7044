"""Persistence adapters for Supabase and the local filesystem."""
