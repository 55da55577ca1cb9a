"""Confidence interval backends."""
