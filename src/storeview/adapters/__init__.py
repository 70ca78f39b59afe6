"""Adapters for the remote services behind the store listing."""
