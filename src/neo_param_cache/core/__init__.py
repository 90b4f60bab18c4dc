"""Core layer: exception hierarchy shared by every module."""
