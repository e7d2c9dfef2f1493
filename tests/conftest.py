"""Shared pytest fixtures for the agentic-engine test suite.

Provides reusable fixtures for:
- ProjectConfig variants (every project type / validator / CI combination)
- In-memory file systems for emitter unit tests
- A freshly scaffolded project on disk for validator and integration tests
"""

from __future__ import annotations

import itertools
from pathlib import Path

import pytest

from agentic_engine.config import ProjectConfig, ProjectType, ValidationLanguage
from agentic_engine.scaffolder import MemoryFileSystem, ProjectGenerator


ALL_CONFIG_COMBINATIONS = list(
    itertools.product(ProjectType, ValidationLanguage, (True, False))
)


def config_id(combo: tuple[ProjectType, ValidationLanguage, bool]) -> str:
    project_type, language, include_ci = combo
    return f"{project_type.value}-{language.value}-{'ci' if include_ci else 'noci'}"


# ---------------------------------------------------------------------------
# Configurations
# ---------------------------------------------------------------------------


@pytest.fixture
def fullstack_config(tmp_path: Path) -> ProjectConfig:
    """Default answers: full-stack, TypeScript validator, CI on."""
    return ProjectConfig(target_path=tmp_path / "my-agent-project")


@pytest.fixture
def backend_config(tmp_path: Path) -> ProjectConfig:
    """Backend-only project with the JavaScript validator and no CI."""
    return ProjectConfig(
        project_type=ProjectType.BACKEND,
        validation_language=ValidationLanguage.JAVASCRIPT,
        include_ci=False,
        target_path=tmp_path / "backend-service",
    )


@pytest.fixture(params=ALL_CONFIG_COMBINATIONS, ids=config_id)
def any_config(request: pytest.FixtureRequest, tmp_path: Path) -> ProjectConfig:
    """Every combination of project type, validator language, and CI flag."""
    project_type, language, include_ci = request.param
    return ProjectConfig(
        project_type=project_type,
        validation_language=language,
        include_ci=include_ci,
        target_path=tmp_path / "project",
    )


# ---------------------------------------------------------------------------
# File systems & generated projects
# ---------------------------------------------------------------------------


@pytest.fixture
def memory_fs() -> MemoryFileSystem:
    """Empty in-memory file system."""
    return MemoryFileSystem()


@pytest.fixture
def scaffolded_project(fullstack_config: ProjectConfig) -> Path:
    """A full-stack project written to disk with the default answers."""
    ProjectGenerator(fullstack_config).generate()
    return Path(fullstack_config.target_path)
