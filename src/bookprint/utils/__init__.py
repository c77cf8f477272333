"""Utility helpers for bookprint."""
