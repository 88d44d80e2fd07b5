"""Clients for external node metadata stores."""
