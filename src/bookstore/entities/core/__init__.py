"""Shared entity base classes and the user entity."""
