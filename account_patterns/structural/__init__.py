"""Structural patterns: Adapter, Bridge and Decorator."""
