"""Owners registry: profile directory presentation core."""
