"""Leaf utilities shared by the matching engine and the CLI."""
