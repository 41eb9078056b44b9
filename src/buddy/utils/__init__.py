"""Utility helpers for Buddy."""
