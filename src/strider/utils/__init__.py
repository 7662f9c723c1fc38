"""Utility helpers for Strider."""
