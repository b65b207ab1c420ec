"""Tinywiki - a file-backed wiki server."""
