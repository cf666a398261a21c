"""Helpers for embedding the client in host frameworks."""
