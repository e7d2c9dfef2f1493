"""agentic-engine scaffolder -- generates the agent-first project layout.

This module takes a ``ProjectConfig`` and writes the documentation templates,
validation tooling and optional CI workflow for a new project.

Quick usage::

    from agentic_engine.config import ProjectConfig, ProjectType
    from agentic_engine.scaffolder import ProjectGenerator

    config = ProjectConfig(project_type=ProjectType.BACKEND, target_path="./svc")
    result = ProjectGenerator(config).generate()
"""

from agentic_engine.scaffolder.filesystem import FileSystem, LocalFileSystem, MemoryFileSystem
from agentic_engine.scaffolder.generator import (
    EmissionPlan,
    GenerationResult,
    PlannedFile,
    ProjectGenerator,
    build_plan,
)
from agentic_engine.scaffolder.templates import TemplateCatalog

__all__ = [
    "EmissionPlan",
    "FileSystem",
    "GenerationResult",
    "LocalFileSystem",
    "MemoryFileSystem",
    "PlannedFile",
    "ProjectGenerator",
    "TemplateCatalog",
    "build_plan",
]
