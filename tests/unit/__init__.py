"""
Unit Tests - Testing Individual Components in Isolation.

Each component is tested in isolation.
Unit tests should be fast, deterministic, and focused.

Test Files:
    - test_name_validator.py: Filter name uniqueness
    - test_relation_resolver.py: Relation values
    - test_descriptor_builder.py: Filter descriptor construction
    - test_manager_assembler.py: Manager assembly and isolation
    - test_filters_container.py: Ordered filters and repository binding
    - test_filter_types.py: Filter type registry
    - test_service_registry.py: In-memory service registry
    - test_config_loader.py: Configuration loading/validation
"""
