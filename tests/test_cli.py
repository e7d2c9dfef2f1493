"""Tests for the command-line entry point (agentic_engine.cli).

Covers:
- Non-interactive init with flags and environment defaults
- Implicit ``init`` when no subcommand is given
- The interactive questionnaire (prompts patched) and cancellation
- ``validate`` exit codes
- Exit codes for invalid configuration and unwritable targets
"""

from __future__ import annotations

import io
from pathlib import Path
from unittest.mock import patch

import pytest
from rich.console import Console
from rich.prompt import Confirm, Prompt

from agentic_engine import cli, utils
from agentic_engine.cli import build_parser, main


_ENV_VARS = (
    "AGENTIC_ENGINE_PATH",
    "AGENTIC_ENGINE_PROJECT_TYPE",
    "AGENTIC_ENGINE_VALIDATION",
    "AGENTIC_ENGINE_OBSERVABILITY",
    "AGENTIC_ENGINE_CI",
)


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in _ENV_VARS:
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def output(monkeypatch: pytest.MonkeyPatch) -> io.StringIO:
    """Capture everything written to the shared Rich console."""
    buffer = io.StringIO()
    recording = Console(file=buffer, width=400, color_system=None)
    monkeypatch.setattr(utils, "console", recording)
    monkeypatch.setattr(cli, "console", recording)
    return buffer


# ---------------------------------------------------------------------------
# Argument parsing
# ---------------------------------------------------------------------------


class TestParser:
    @pytest.mark.unit
    def test_init_flags(self):
        args = build_parser().parse_args(
            ["init", "--path", "svc", "--type", "backend", "--validation", "javascript", "--no-ci", "--yes"]
        )
        assert args.path == "svc"
        assert args.project_type == "backend"
        assert args.validation == "javascript"
        assert args.ci is False
        assert args.observability is None
        assert args.yes is True

    @pytest.mark.unit
    def test_validate_defaults_to_cwd(self):
        args = build_parser().parse_args(["validate"])
        assert args.root == "."

    @pytest.mark.unit
    def test_rejects_unknown_type(self):
        with pytest.raises(SystemExit):
            build_parser().parse_args(["init", "--type", "mobile"])

    @pytest.mark.unit
    def test_version(self, capsys: pytest.CaptureFixture[str]):
        with pytest.raises(SystemExit) as exc_info:
            main(["--version"])
        assert exc_info.value.code == 0
        assert "agentic-engine" in capsys.readouterr().out


# ---------------------------------------------------------------------------
# init
# ---------------------------------------------------------------------------


class TestInit:
    @pytest.mark.unit
    def test_yes_uses_defaults(self, tmp_path: Path, output: io.StringIO):
        target = tmp_path / "svc"
        assert main(["init", "--path", str(target), "--yes"]) == 0
        assert (target / "AGENTS.md").exists()
        assert (target / "FRONTEND.md").exists()
        assert (target / "scripts" / "package.json").exists()
        assert (target / ".github" / "workflows" / "validate-docs.yml").exists()
        text = output.getvalue()
        assert "Project created successfully!" in text
        assert "cd scripts && npm install && npm run validate" in text

    @pytest.mark.unit
    def test_subcommand_is_optional(self, tmp_path: Path, output: io.StringIO):
        target = tmp_path / "svc"
        assert main(["--path", str(target), "--yes"]) == 0
        assert (target / "AGENTS.md").exists()

    @pytest.mark.unit
    def test_no_arguments_defaults_to_init(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch, output: io.StringIO):
        monkeypatch.chdir(tmp_path)
        monkeypatch.setenv("AGENTIC_ENGINE_PATH", "from-env")
        with patch.object(Prompt, "ask", side_effect=lambda *a, **kw: kw["default"]), \
             patch.object(Confirm, "ask", side_effect=lambda *a, **kw: kw["default"]):
            assert main([]) == 0
        assert (tmp_path / "from-env" / "AGENTS.md").exists()

    @pytest.mark.unit
    def test_backend_flags(self, tmp_path: Path, output: io.StringIO):
        target = tmp_path / "api"
        code = main([
            "init", "--path", str(target), "--type", "backend",
            "--validation", "javascript", "--no-ci", "--yes",
        ])
        assert code == 0
        assert not (target / "FRONTEND.md").exists()
        assert not (target / ".github").exists()
        assert not (target / "scripts" / "package.json").exists()
        assert (target / "scripts" / "validate-structure.js").exists()
        assert "node scripts/validate-structure.js" in output.getvalue()

    @pytest.mark.unit
    def test_environment_defaults(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch, output: io.StringIO):
        target = tmp_path / "from-env"
        monkeypatch.setenv("AGENTIC_ENGINE_PATH", str(target))
        monkeypatch.setenv("AGENTIC_ENGINE_PROJECT_TYPE", "frontend")
        monkeypatch.setenv("AGENTIC_ENGINE_CI", "false")
        assert main(["--yes"]) == 0
        assert (target / "FRONTEND.md").exists()
        assert not (target / ".github").exists()

    @pytest.mark.unit
    def test_verbose_lists_files(self, tmp_path: Path, output: io.StringIO):
        assert main(["init", "--path", str(tmp_path / "svc"), "--yes", "--verbose"]) == 0
        text = output.getvalue()
        assert "wrote" in text
        assert "docs/design-docs/core-beliefs.md" in text

    @pytest.mark.unit
    def test_non_empty_target_warns(self, tmp_path: Path, output: io.StringIO):
        target = tmp_path / "svc"
        target.mkdir()
        (target / "existing.txt").write_text("keep me", encoding="utf-8")
        assert main(["init", "--path", str(target), "--yes"]) == 0
        assert "not empty" in output.getvalue()
        assert (target / "existing.txt").read_text(encoding="utf-8") == "keep me"

    @pytest.mark.unit
    def test_rerun_overwrites(self, tmp_path: Path, output: io.StringIO):
        target = tmp_path / "svc"
        assert main(["init", "--path", str(target), "--yes"]) == 0
        (target / "DESIGN.md").write_text("edited", encoding="utf-8")
        assert main(["init", "--path", str(target), "--yes"]) == 0
        assert (target / "DESIGN.md").read_text(encoding="utf-8").startswith("# Design Principles")


class TestInteractive:
    @pytest.mark.unit
    def test_answers_drive_generation(self, tmp_path: Path, output: io.StringIO):
        target = tmp_path / "asked"
        with patch.object(Prompt, "ask", side_effect=[str(target), "backend", "javascript"]), \
             patch.object(Confirm, "ask", side_effect=[True, False]):
            assert main(["init"]) == 0
        assert (target / "scripts" / "validate-structure.js").exists()
        assert not (target / "FRONTEND.md").exists()
        assert not (target / ".github").exists()
        assert "Backend only" in output.getvalue()

    @pytest.mark.unit
    @pytest.mark.parametrize("interrupt", [KeyboardInterrupt, EOFError])
    def test_cancel_writes_nothing(self, tmp_path: Path, output: io.StringIO, interrupt: type[BaseException]):
        target = tmp_path / "never"
        with patch.object(Prompt, "ask", side_effect=[str(target), interrupt()]):
            assert main(["init"]) == 1
        assert not target.exists()
        assert "Operation cancelled." in output.getvalue()


# ---------------------------------------------------------------------------
# Failure exit codes
# ---------------------------------------------------------------------------


class TestFailures:
    @pytest.mark.unit
    def test_invalid_environment_value(self, monkeypatch: pytest.MonkeyPatch, output: io.StringIO):
        monkeypatch.setenv("AGENTIC_ENGINE_PROJECT_TYPE", "mobile")
        assert main(["--yes"]) == 2
        assert "Invalid configuration" in output.getvalue()

    @pytest.mark.unit
    def test_invalid_environment_boolean(self, monkeypatch: pytest.MonkeyPatch, output: io.StringIO):
        monkeypatch.setenv("AGENTIC_ENGINE_CI", "sometimes")
        assert main(["--yes"]) == 2

    @pytest.mark.unit
    def test_target_is_a_file(self, tmp_path: Path, output: io.StringIO):
        target = tmp_path / "occupied"
        target.write_text("x", encoding="utf-8")
        assert main(["init", "--path", str(target), "--yes"]) == 1
        text = output.getvalue()
        assert "Error:" in text
        assert "not a directory" in text

    @pytest.mark.unit
    def test_unlistable_target(self, tmp_path: Path, output: io.StringIO):
        target = tmp_path / "locked"
        target.mkdir()
        with patch.object(Path, "iterdir", side_effect=PermissionError(13, "Permission denied")):
            assert main(["init", "--path", str(target), "--yes"]) == 1
        text = output.getvalue()
        assert "Error:" in text
        assert "Permission denied" in text
        assert not (target / "AGENTS.md").exists()


# ---------------------------------------------------------------------------
# validate
# ---------------------------------------------------------------------------


class TestValidate:
    @pytest.mark.unit
    def test_fresh_project_passes(self, scaffolded_project: Path, output: io.StringIO):
        assert main(["validate", str(scaffolded_project)]) == 0
        text = output.getvalue()
        assert "Warnings (1):" in text
        assert "Structure validation passed." in text

    @pytest.mark.unit
    def test_missing_doc_fails(self, scaffolded_project: Path, output: io.StringIO):
        (scaffolded_project / "SECURITY.md").unlink()
        assert main(["validate", str(scaffolded_project)]) == 1
        text = output.getvalue()
        assert "Errors (1):" in text
        assert "Missing required document: SECURITY.md" in text

    @pytest.mark.unit
    def test_cwd_default(self, scaffolded_project: Path, monkeypatch: pytest.MonkeyPatch, output: io.StringIO):
        monkeypatch.chdir(scaffolded_project)
        assert main(["validate"]) == 0

    @pytest.mark.unit
    def test_not_a_directory(self, tmp_path: Path, output: io.StringIO):
        assert main(["validate", str(tmp_path / "missing")]) == 2
        assert "Not a directory" in output.getvalue()
