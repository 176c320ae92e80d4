"""Helpers shared across the request and response models."""
