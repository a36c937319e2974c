"""Behavioral patterns: Command and Mediator."""
