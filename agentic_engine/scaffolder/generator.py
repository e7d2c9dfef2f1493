"""Main scaffolding orchestrator.

Turns a ``ProjectConfig`` into an ``EmissionPlan`` (the ordered directories
and ``(path, content)`` pairs for the agent-first layout) and writes that plan
to disk.  Plan construction is pure; ``ProjectGenerator.generate`` is the only
code that touches the file system.
"""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field

from agentic_engine.config import ProjectConfig, ValidationLanguage
from agentic_engine.errors import FileSystemError

from .filesystem import FileSystem, LocalFileSystem
from .templates import TemplateCatalog, has_frontend, script_extension


# ---------------------------------------------------------------------------
# Layout constants
# ---------------------------------------------------------------------------

BASE_DIRECTORIES: tuple[str, ...] = (
    "docs/design-docs",
    "docs/exec-plans/active",
    "docs/exec-plans/completed",
    "docs/product-specs",
    "docs/references",
    "docs/generated",
    "scripts",
)

CI_DIRECTORY = ".github/workflows"

# (relative path, template identifier), written for every configuration.
ROOT_DOCUMENTS: tuple[tuple[str, str], ...] = (
    ("AGENTS.md", "agents"),
    ("CLAUDE.md", "agents"),
    ("ARCHITECTURE.md", "architecture"),
    ("DESIGN.md", "design"),
    ("PLANS.md", "plans"),
    ("PRODUCT_SENSE.md", "product-sense"),
    ("QUALITY_SCORE.md", "quality-score"),
    ("RELIABILITY.md", "reliability"),
    ("SECURITY.md", "security"),
)

DOCS_DOCUMENTS: tuple[tuple[str, str], ...] = (
    ("docs/design-docs/index.md", "design-docs-index"),
    ("docs/design-docs/core-beliefs.md", "core-beliefs"),
    ("docs/design-docs/template.md", "design-doc"),
    ("docs/exec-plans/template.md", "exec-plan"),
    ("docs/exec-plans/tech-debt-tracker.md", "tech-debt-tracker"),
    ("docs/product-specs/index.md", "product-specs-index"),
    ("docs/product-specs/template.md", "product-spec"),
)

FRONTEND_DOCUMENT = ("FRONTEND.md", "frontend")
VALIDATION_MANIFEST = ("scripts/package.json", "validation-manifest")
CI_FILES: tuple[tuple[str, str], ...] = (
    (".github/workflows/validate-docs.yml", "github-workflow"),
    (".github/markdown-link-check-config.json", "markdown-link-check"),
)
REPOSITORY_FILES: tuple[tuple[str, str], ...] = (
    (".gitignore", "gitignore"),
    ("biome.json", "biome"),
    ("README.md", "readme"),
)


# ---------------------------------------------------------------------------
# Plan models
# ---------------------------------------------------------------------------


class PlannedFile(BaseModel):
    """A single file the generator will write."""

    model_config = ConfigDict(frozen=True)

    path: str = Field(..., description="POSIX path relative to the project root")
    template: str = Field(..., description="Template identifier that produced the content")
    content: str


class EmissionPlan(BaseModel):
    """Everything a scaffolding run will create, in write order.

    Directories are listed parents-first.  The plan is a pure function of the
    ``ProjectConfig`` it was built from.
    """

    model_config = ConfigDict(frozen=True)

    directories: tuple[str, ...] = ()
    files: tuple[PlannedFile, ...] = ()

    def paths(self) -> list[str]:
        """Return the relative path of every planned file, in order."""
        return [f.path for f in self.files]

    def content_for(self, path: str) -> str:
        """Return the planned content of *path*.

        Raises:
            KeyError: If *path* is not part of the plan.
        """
        for planned in self.files:
            if planned.path == path:
                return planned.content
        raise KeyError(path)


class GenerationResult(BaseModel):
    """Summary of a completed generation run."""

    root: Path
    directories: list[str] = Field(default_factory=list)
    files: list[str] = Field(default_factory=list)


# ---------------------------------------------------------------------------
# Plan construction
# ---------------------------------------------------------------------------


def build_plan(config: ProjectConfig, catalog: TemplateCatalog | None = None) -> EmissionPlan:
    """Compute the directories and files for *config* without any I/O."""
    catalog = catalog or TemplateCatalog()

    directories = list(BASE_DIRECTORIES)
    if config.include_ci:
        directories.append(CI_DIRECTORY)

    entries: list[tuple[str, str]] = list(ROOT_DOCUMENTS)
    if has_frontend(config.project_type):
        entries.append(FRONTEND_DOCUMENT)
    entries.extend(DOCS_DOCUMENTS)
    entries.append(
        (
            f"scripts/validate-structure.{script_extension(config.validation_language)}",
            "validation-script",
        )
    )
    if config.validation_language is ValidationLanguage.TYPESCRIPT:
        entries.append(VALIDATION_MANIFEST)
    if config.include_ci:
        entries.extend(CI_FILES)
    entries.extend(REPOSITORY_FILES)

    # Render each template once so AGENTS.md and CLAUDE.md share one string.
    rendered: dict[str, str] = {}
    files: list[PlannedFile] = []
    for path, template in entries:
        if template not in rendered:
            rendered[template] = catalog.render(template, config)
        files.append(PlannedFile(path=path, template=template, content=rendered[template]))

    return EmissionPlan(directories=tuple(directories), files=tuple(files))


# ---------------------------------------------------------------------------
# Main generator
# ---------------------------------------------------------------------------


ProgressCallback = Callable[[str], None]


class ProjectGenerator:
    """Writes the agent-first project layout for a ``ProjectConfig``.

    Re-running against the same target is safe: directory creation tolerates
    existing directories and every file is overwritten.  A failure part-way
    through leaves whatever was already written in place.
    """

    def __init__(
        self,
        config: ProjectConfig,
        fs: FileSystem | None = None,
        catalog: TemplateCatalog | None = None,
    ) -> None:
        self.config = config
        self.fs: FileSystem = fs if fs is not None else LocalFileSystem()
        self.catalog = catalog or TemplateCatalog()

    # -- Public API --------------------------------------------------------

    def plan(self) -> EmissionPlan:
        return build_plan(self.config, self.catalog)

    def generate(self, on_progress: ProgressCallback | None = None) -> GenerationResult:
        """Create the project at ``config.target_path``.

        Args:
            on_progress: Optional callback receiving a short stage message
                before each group of writes.

        Returns:
            A ``GenerationResult`` listing what was created.

        Raises:
            FileSystemError: If the target exists but is not a directory, or
                if any directory or file cannot be created.
        """
        notify = on_progress or (lambda _message: None)
        plan = self.plan()
        root = Path(self.config.target_path)

        notify("Creating project structure")
        self._ensure_root(root)
        for directory in plan.directories:
            self.fs.mkdir(root / directory)

        notify("Writing documentation templates")
        for planned in plan.files:
            if planned.template == "validation-script":
                notify("Creating validation tooling")
            elif planned.template == "github-workflow":
                notify("Creating CI/CD workflows")
            self.fs.write_text(root / planned.path, planned.content)

        return GenerationResult(
            root=root,
            directories=list(plan.directories),
            files=plan.paths(),
        )

    # -- Helpers -----------------------------------------------------------

    def _ensure_root(self, root: Path) -> None:
        if self.fs.exists(root) and not self.fs.is_dir(root):
            raise FileSystemError(root, "exists and is not a directory")
        self.fs.mkdir(root)
