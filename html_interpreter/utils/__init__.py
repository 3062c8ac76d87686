"""Utility helpers for HTML Interpreter."""
