"""Setup configuration for the account-patterns package.

This setup.py is kept minimal since package metadata is now defined in pyproject.toml.
"""
from setuptools import setup

# All configuration is in pyproject.toml
setup()
