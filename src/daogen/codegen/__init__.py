"""
daogen code generation.

Template generators turn the descriptor model into source files, written
line by line through an Emitter.
"""

from daogen.codegen.generator import (
    GeneratedFile,
    GenerationResult,
    OutputFile,
    PackageLayout,
    SharedFileGenerator,
    TemplateFamily,
    TemplateGenerator,
)
from daogen.codegen.registry import DEFAULT_FAMILY, TemplateRegistry, default_registry
from daogen.codegen.statements import StatementPlan, plan_insert, plan_update

__all__ = [
    "TemplateGenerator",
    "SharedFileGenerator",
    "TemplateFamily",
    "PackageLayout",
    "OutputFile",
    "GeneratedFile",
    "GenerationResult",
    "TemplateRegistry",
    "default_registry",
    "DEFAULT_FAMILY",
    "StatementPlan",
    "plan_insert",
    "plan_update",
]
