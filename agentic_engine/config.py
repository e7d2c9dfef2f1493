"""agentic-engine configuration.

The answers collected by the questionnaire are captured once in an immutable
``ProjectConfig`` and passed by value into the scaffolder.  Pydantic v2 validates
the enumerated choices at construction time, so an invalid project type or
validator language never reaches the template layer.
"""

from __future__ import annotations

import os
from enum import Enum
from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, Field


DEFAULT_TARGET_PATH = Path("./my-agent-project")


class ProjectType(str, Enum):
    """Shape of the project being scaffolded."""

    FULLSTACK = "fullstack"
    BACKEND = "backend"
    FRONTEND = "frontend"

    @property
    def label(self) -> str:
        return _PROJECT_TYPE_LABELS[self]


class ValidationLanguage(str, Enum):
    """Language of the emitted ``scripts/validate-structure`` script."""

    TYPESCRIPT = "typescript"
    JAVASCRIPT = "javascript"

    @property
    def label(self) -> str:
        return _LANGUAGE_LABELS[self]


_PROJECT_TYPE_LABELS: dict[ProjectType, str] = {
    ProjectType.FULLSTACK: "Full-stack (frontend + backend)",
    ProjectType.BACKEND: "Backend only",
    ProjectType.FRONTEND: "Frontend only",
}

_LANGUAGE_LABELS: dict[ValidationLanguage, str] = {
    ValidationLanguage.TYPESCRIPT: "TypeScript (recommended)",
    ValidationLanguage.JAVASCRIPT: "JavaScript",
}

_TRUTHY = {"1", "true", "yes", "y", "on"}
_FALSY = {"0", "false", "no", "n", "off"}


class ProjectConfig(BaseModel):
    """The user's choices for a single scaffolding run.

    Instances are frozen: the questionnaire builds one, and everything
    downstream (plan construction, template rendering, file emission) only
    reads from it.
    """

    model_config = ConfigDict(frozen=True)

    project_type: ProjectType = Field(default=ProjectType.FULLSTACK)
    validation_language: ValidationLanguage = Field(default=ValidationLanguage.TYPESCRIPT)
    include_observability: bool = Field(
        default=True,
        description="Collected for compatibility; does not change the emitted files",
    )
    include_ci: bool = Field(default=True, description="Emit GitHub Actions workflow files")
    target_path: Path = Field(default=DEFAULT_TARGET_PATH)

    # ------------------------------------------------------------------
    # Construction helpers
    # ------------------------------------------------------------------

    @classmethod
    def from_env(cls, **overrides: Any) -> "ProjectConfig":
        """Build a ``ProjectConfig`` from environment variables.

        Recognised variables (all optional):
            AGENTIC_ENGINE_PATH, AGENTIC_ENGINE_PROJECT_TYPE,
            AGENTIC_ENGINE_VALIDATION, AGENTIC_ENGINE_OBSERVABILITY,
            AGENTIC_ENGINE_CI.

        Keyword *overrides* that are not ``None`` take precedence over the
        environment, which in turn takes precedence over the model defaults.
        """
        kwargs: dict[str, Any] = {}
        if os.environ.get("AGENTIC_ENGINE_PATH"):
            kwargs["target_path"] = Path(os.environ["AGENTIC_ENGINE_PATH"])
        if os.environ.get("AGENTIC_ENGINE_PROJECT_TYPE"):
            kwargs["project_type"] = os.environ["AGENTIC_ENGINE_PROJECT_TYPE"].strip().lower()
        if os.environ.get("AGENTIC_ENGINE_VALIDATION"):
            kwargs["validation_language"] = os.environ["AGENTIC_ENGINE_VALIDATION"].strip().lower()
        if os.environ.get("AGENTIC_ENGINE_OBSERVABILITY"):
            kwargs["include_observability"] = parse_bool(os.environ["AGENTIC_ENGINE_OBSERVABILITY"])
        if os.environ.get("AGENTIC_ENGINE_CI"):
            kwargs["include_ci"] = parse_bool(os.environ["AGENTIC_ENGINE_CI"])

        kwargs.update({k: v for k, v in overrides.items() if v is not None})
        return cls(**kwargs)


def parse_bool(value: str) -> bool:
    """Interpret a yes/no style environment value.

    Raises:
        ValueError: If *value* is not a recognised boolean spelling.
    """
    lowered = value.strip().lower()
    if lowered in _TRUTHY:
        return True
    if lowered in _FALSY:
        return False
    raise ValueError(f"Not a boolean value: {value!r}")
