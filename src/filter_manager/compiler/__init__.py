"""
Compiler Package - Configuration to Object Graph.

Components:
    - validate_filter_names: global filter name uniqueness
    - RelationResolver: relation config to Relation values
    - FilterDescriptorBuilder: one filter config to its descriptor
    - ManagerAssembler: manager config to FilterManager
    - ConfigCompiler: the whole pipeline

Design Principles:
    - Fail fast before building anything
    - No partial filter registry is ever exposed
    - Managers fail independently
"""

from filter_manager.compiler.config_compiler import (
    CompiledConfiguration,
    ConfigCompiler,
    compile_config,
    compile_file,
)
from filter_manager.compiler.descriptor_builder import FilterDescriptorBuilder
from filter_manager.compiler.manager_assembler import AssemblyResult, ManagerAssembler
from filter_manager.compiler.name_validator import validate_filter_names
from filter_manager.compiler.relation_resolver import RelationResolver

__all__ = [
    "CompiledConfiguration",
    "ConfigCompiler",
    "compile_config",
    "compile_file",
    "FilterDescriptorBuilder",
    "AssemblyResult",
    "ManagerAssembler",
    "validate_filter_names",
    "RelationResolver",
]
