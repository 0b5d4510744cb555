"""Neon City portfolio backend."""
