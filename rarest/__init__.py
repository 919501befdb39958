"""Destiny 2 rarest-items service."""
