"""Helpers shared by FountainKit CLI commands."""
