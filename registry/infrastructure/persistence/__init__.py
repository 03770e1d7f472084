"""Persistence: repositories for the authoritative relational store."""
