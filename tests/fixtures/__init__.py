"""
Test Fixtures - Shared Test Data and Configurations.

This package contains reusable test fixtures:
    - sample_config.yaml: Filters of every common type and two managers
    - override_config.yaml: Overlay merged over sample_config.yaml

Usage:
    Use the path fixtures from conftest.py.
"""
