"""
Integration Tests - Testing Component Interactions.

Integration tests verify that the compiler stages work together, from
YAML documents to registered managers.
"""
