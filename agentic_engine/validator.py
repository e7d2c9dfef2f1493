"""Structure validation for scaffolded projects.

Performs the same checks as the ``scripts/validate-structure`` script emitted
into every project, as a single linear pass that accumulates findings:

1. Required root documents are present.
2. AGENTS.md and CLAUDE.md are byte-identical.
3. AGENTS.md stays under the line budget (warning only).
4. Required ``docs/`` directories are present.
5. Index files are present (warning only).
6. Relative links in AGENTS.md resolve (warning only).
7. Design docs exist and are not stale (warning only).

Findings are never raised.  Only an unexpected condition, such as AGENTS.md
becoming unreadable after it was found, propagates as an exception.
"""

from __future__ import annotations

import re
import time
from enum import Enum
from pathlib import Path

from pydantic import BaseModel, Field


REQUIRED_DOCS: tuple[str, ...] = (
    "AGENTS.md",
    "CLAUDE.md",
    "ARCHITECTURE.md",
    "DESIGN.md",
    "PLANS.md",
    "PRODUCT_SENSE.md",
    "QUALITY_SCORE.md",
    "RELIABILITY.md",
    "SECURITY.md",
)

REQUIRED_DIRS: tuple[str, ...] = (
    "docs/design-docs",
    "docs/exec-plans/active",
    "docs/exec-plans/completed",
    "docs/product-specs",
    "docs/references",
    "docs/generated",
)

REQUIRED_INDEXES: tuple[str, ...] = (
    "docs/design-docs/index.md",
    "docs/product-specs/index.md",
)

DESIGN_DOCS_DIR = "docs/design-docs"

# Files the scaffolder itself writes into docs/design-docs.
PLACEHOLDER_DOCS: frozenset[str] = frozenset({"index.md", "template.md", "core-beliefs.md"})

MAX_AGENTS_LINES = 150
STALE_AFTER_SECONDS = 6 * 30 * 24 * 60 * 60

_LINK_RE = re.compile(r"\[([^\]]+)\]\(([^)]+)\)")
_SCHEME_RE = re.compile(r"^[A-Za-z][A-Za-z0-9+.-]*:")


class Severity(str, Enum):
    ERROR = "error"
    WARNING = "warning"


class Finding(BaseModel):
    """One problem reported by the validator."""

    severity: Severity
    check: str = Field(..., description="Short name of the check that produced it")
    message: str


class ValidationReport(BaseModel):
    """Accumulated findings for one validation pass."""

    root: Path
    errors: list[Finding] = Field(default_factory=list)
    warnings: list[Finding] = Field(default_factory=list)

    @property
    def passed(self) -> bool:
        """``True`` when no errors were found; warnings do not count."""
        return not self.errors

    def error_messages(self) -> list[str]:
        return [f.message for f in self.errors]

    def warning_messages(self) -> list[str]:
        return [f.message for f in self.warnings]


class StructureValidator:
    """Checks a project directory against the agent-first layout.

    Args:
        root: Project root to validate.  Defaults to the current directory.
        now: Reference time (epoch seconds) for the freshness check.
            Defaults to the time ``validate`` is called.
    """

    def __init__(self, root: str | Path | None = None, now: float | None = None) -> None:
        self.root = Path(root) if root is not None else Path.cwd()
        self.now = now
        self._report = ValidationReport(root=self.root)

    def validate(self) -> ValidationReport:
        """Run every check once and return the report."""
        self._report = ValidationReport(root=self.root)

        self._validate_root_docs()
        self._validate_docs_structure()
        self._validate_cross_links()
        self._validate_doc_freshness()

        return self._report

    # -- Checks ------------------------------------------------------------

    def _validate_root_docs(self) -> None:
        for doc in REQUIRED_DOCS:
            if not (self.root / doc).exists():
                self._error("required-docs", f"Missing required document: {doc}")

        agents = self.root / "AGENTS.md"
        claude = self.root / "CLAUDE.md"
        if agents.is_file() and claude.is_file():
            if agents.read_bytes() != claude.read_bytes():
                self._error("mirror", "AGENTS.md and CLAUDE.md must be identical")

        if agents.is_file():
            line_count = len(_read_guide(agents).split("\n"))
            if line_count > MAX_AGENTS_LINES:
                self._warning(
                    "size",
                    f"AGENTS.md is {line_count} lines (recommended: ~100 lines). "
                    "Consider moving details to docs/",
                )

    def _validate_docs_structure(self) -> None:
        for directory in REQUIRED_DIRS:
            if not (self.root / directory).is_dir():
                self._error("directories", f"Missing required directory: {directory}")

        for index in REQUIRED_INDEXES:
            if not (self.root / index).exists():
                self._warning("indexes", f"Missing index file: {index}")

    def _validate_cross_links(self) -> None:
        agents = self.root / "AGENTS.md"
        if not agents.is_file():
            return

        content = _read_guide(agents)
        for match in _LINK_RE.finditer(content):
            link = match.group(2).strip()
            if _SCHEME_RE.match(link):
                continue
            target = link.split("#", 1)[0]
            if not target:
                continue
            # Leading "/" means the project root, not the file-system root.
            if not (self.root / target.lstrip("/")).exists():
                self._warning("links", f"Broken link in AGENTS.md: {link}")

    def _validate_doc_freshness(self) -> None:
        design_dir = self.root / DESIGN_DOCS_DIR
        if not design_dir.is_dir():
            return

        docs = sorted(
            p for p in design_dir.iterdir()
            if p.is_file() and p.suffix == ".md" and p.name not in PLACEHOLDER_DOCS
        )
        if not docs:
            self._warning("freshness", "No design documents found in docs/design-docs/")
            return

        now = self.now if self.now is not None else time.time()
        for doc in docs:
            age = now - doc.stat().st_mtime
            if age > STALE_AFTER_SECONDS:
                self._warning(
                    "freshness",
                    f"Design doc hasn't been updated in 6+ months: {doc.name}",
                )

    # -- Helpers -----------------------------------------------------------

    def _error(self, check: str, message: str) -> None:
        self._report.errors.append(Finding(severity=Severity.ERROR, check=check, message=message))

    def _warning(self, check: str, message: str) -> None:
        self._report.warnings.append(Finding(severity=Severity.WARNING, check=check, message=message))


def _read_guide(path: Path) -> str:
    # Undecodable bytes become U+FFFD rather than aborting the run.
    return path.read_text(encoding="utf-8", errors="replace")


def validate_structure(root: str | Path | None = None) -> ValidationReport:
    """Convenience wrapper: validate *root* and return the report."""
    return StructureValidator(root).validate()
