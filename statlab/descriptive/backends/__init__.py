"""Descriptive statistics backends."""
