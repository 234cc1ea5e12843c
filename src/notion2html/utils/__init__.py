"""Utility modules for notion2html."""
