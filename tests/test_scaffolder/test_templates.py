"""Tests for the template catalog (agentic_engine.scaffolder.templates).

Covers:
- Catalog registration and lookup
- FRONTEND.md references only for UI project types
- Validate command and script extension per validator language
- Technology-choice sections in ARCHITECTURE.md
- Validation manifest contents
- JSON/YAML stubs are well formed
- Both validator variants carry the same checks
- Jinja2 rendering of the inline templates
"""

from __future__ import annotations

import json

import pytest
import yaml
from jinja2 import UndefinedError

from agentic_engine.config import ProjectConfig, ProjectType, ValidationLanguage
from agentic_engine.scaffolder.templates import (
    TemplateCatalog,
    agents_template,
    architecture_template,
    biome_config_template,
    github_workflow_template,
    has_backend,
    has_frontend,
    markdown_link_check_config,
    readme_template,
    render_string,
    script_extension,
    validate_command,
    validation_manifest,
    validation_manifest_template,
    validation_script_template,
)


pytestmark = pytest.mark.unit

TS = ValidationLanguage.TYPESCRIPT
JS = ValidationLanguage.JAVASCRIPT


# ---------------------------------------------------------------------------
# Catalog
# ---------------------------------------------------------------------------


class TestTemplateCatalog:
    def test_registers_every_template(self):
        names = TemplateCatalog().names()
        assert len(names) == 23
        for expected in ("agents", "readme", "validation-script", "github-workflow"):
            assert expected in names

    def test_names_are_sorted(self):
        names = TemplateCatalog().names()
        assert names == sorted(names)

    def test_contains(self):
        catalog = TemplateCatalog()
        assert "biome" in catalog
        assert "nope" not in catalog

    def test_unknown_template_raises_key_error(self):
        with pytest.raises(KeyError, match="Unknown template"):
            TemplateCatalog().render("nope", ProjectConfig())

    def test_custom_registry(self):
        catalog = TemplateCatalog({"hello": lambda c: f"type={c.project_type.value}"})
        assert catalog.render("hello", ProjectConfig(project_type="backend")) == "type=backend"
        assert catalog.names() == ["hello"]

    @pytest.mark.parametrize("name", TemplateCatalog().names())
    def test_every_template_renders_text(self, name: str):
        text = TemplateCatalog().render(name, ProjectConfig())
        assert isinstance(text, str)
        assert text.strip()

    @pytest.mark.parametrize("name", TemplateCatalog().names())
    def test_rendering_is_deterministic(self, name: str):
        config = ProjectConfig(project_type="frontend", validation_language="javascript")
        catalog = TemplateCatalog()
        assert catalog.render(name, config) == catalog.render(name, config)


# ---------------------------------------------------------------------------
# Frontend conditionals
# ---------------------------------------------------------------------------


class TestFrontendReferences:
    @pytest.mark.parametrize("project_type", [ProjectType.FULLSTACK, ProjectType.FRONTEND])
    def test_ui_types_have_frontend(self, project_type: ProjectType):
        assert has_frontend(project_type) is True
        assert "[FRONTEND.md](./FRONTEND.md)" in agents_template(project_type)
        assert "FRONTEND.md" in readme_template(project_type, TS)

    def test_backend_never_mentions_frontend_doc(self):
        assert has_frontend(ProjectType.BACKEND) is False
        assert "FRONTEND.md" not in agents_template(ProjectType.BACKEND)
        assert "FRONTEND.md" not in readme_template(ProjectType.BACKEND, TS)

    def test_agents_keeps_blank_line_after_quick_reference(self):
        text = agents_template(ProjectType.BACKEND)
        assert "- **Planning:** See [PLANS.md](./PLANS.md)\n\n\n## Documentation Structure" in text

    def test_agents_frontend_line_follows_planning(self):
        text = agents_template(ProjectType.FULLSTACK)
        assert (
            "- **Planning:** See [PLANS.md](./PLANS.md)\n"
            "- **Frontend:** See [FRONTEND.md](./FRONTEND.md)\n\n\n"
            "## Documentation Structure"
        ) in text

    def test_readme_tree_lists_frontend_only_for_ui(self):
        ui = readme_template(ProjectType.FRONTEND, TS)
        backend = readme_template(ProjectType.BACKEND, TS)
        assert "# Design principles\n├── FRONTEND.md            # Frontend guidelines\n├── PLANS.md" in ui
        assert "# Design principles\n├── PLANS.md" in backend


class TestTechnologyChoices:
    def test_fullstack_has_both_sections(self):
        assert has_backend(ProjectType.FULLSTACK) is True
        text = architecture_template(ProjectType.FULLSTACK)
        assert "### Frontend" in text
        assert "### Backend" in text

    def test_frontend_only(self):
        text = architecture_template(ProjectType.FRONTEND)
        assert "### Frontend" in text
        assert "### Backend" not in text

    def test_backend_only(self):
        text = architecture_template(ProjectType.BACKEND)
        assert "### Backend" in text
        assert "### Frontend" not in text

    @pytest.mark.parametrize("project_type", list(ProjectType))
    def test_followed_by_infrastructure(self, project_type: ProjectType):
        text = architecture_template(project_type)
        assert "choice]\n\n### Infrastructure" in text
        assert "choice]\n\n\n" not in text


# ---------------------------------------------------------------------------
# Validation tooling
# ---------------------------------------------------------------------------


class TestValidateCommand:
    def test_typescript_installs_then_runs(self):
        assert validate_command(TS) == "cd scripts && npm install && npm run validate"
        assert script_extension(TS) == "ts"

    def test_javascript_single_step(self):
        assert validate_command(JS) == "node scripts/validate-structure.js"
        assert script_extension(JS) == "js"

    @pytest.mark.parametrize("language", [TS, JS])
    def test_workflow_runs_matching_command(self, language: ValidationLanguage):
        workflow = yaml.safe_load(github_workflow_template(language))
        steps = workflow["jobs"]["validate-structure"]["steps"]
        run_step = next(s for s in steps if s["name"] == "Run structure validation")
        assert run_step["run"] == validate_command(language)

    @pytest.mark.parametrize("language", [TS, JS])
    def test_readme_shows_matching_command(self, language: ValidationLanguage):
        text = readme_template(ProjectType.FULLSTACK, language)
        assert text.count(validate_command(language)) == 2
        assert f"validate-structure.{script_extension(language)}" in text


class TestValidationManifest:
    def test_single_dev_dependency(self):
        manifest = validation_manifest()
        assert manifest["devDependencies"] == {"tsx": "^4.19.2"}
        assert manifest["scripts"] == {"validate": "cd .. && tsx scripts/validate-structure.ts"}

    def test_template_is_pretty_json(self):
        text = validation_manifest_template()
        assert json.loads(text) == validation_manifest()
        assert text.startswith('{\n  "name": "validation-scripts"')


class TestValidatorScripts:
    def test_variants_selected_wholesale(self):
        ts = validation_script_template(TS)
        js = validation_script_template(JS)
        assert ts.startswith("#!/usr/bin/env tsx")
        assert js.startswith("#!/usr/bin/env node")
        assert "interface ValidationResult" in ts
        assert "interface ValidationResult" not in js

    @pytest.mark.parametrize("language", [TS, JS])
    def test_same_checks_in_both(self, language: ValidationLanguage):
        text = validation_script_template(language)
        for marker in (
            "Missing required document: ${doc}",
            "AGENTS.md and CLAUDE.md must be identical",
            "lineCount > 150",
            "Missing required directory: ${dir}",
            "Missing index file: ${index}",
            "Broken link in AGENTS.md: ${linkPath}",
            "No design documents found in docs/design-docs/",
            "6 * 30 * 24 * 60 * 60 * 1000",
            "PLACEHOLDER_DOCS",
            "/^[a-zA-Z][a-zA-Z0-9+.-]*:/",
            "process.exit(success ? 0 : 1);",
        ):
            assert marker in text, marker

    def test_link_regex_survives_escaping(self):
        assert r"const linkRegex = /\[([^\]]+)\]\(([^)]+)\)/g;" in validation_script_template(JS)


# ---------------------------------------------------------------------------
# README CI section and config stubs
# ---------------------------------------------------------------------------


class TestReadme:
    def test_ci_section_lists_checks(self):
        text = readme_template(ProjectType.FULLSTACK, TS, include_ci=True)
        assert "GitHub Actions automatically validate:" in text
        assert "- Doc freshness\n\n## 📖 Documentation" in text

    def test_no_ci_section_points_to_own_pipeline(self):
        text = readme_template(ProjectType.FULLSTACK, TS, include_ci=False)
        assert "GitHub Actions automatically validate:" not in text
        assert "No CI workflows were generated" in text
        assert "layout enforced.\n\n## 📖 Documentation" in text

    def test_no_template_syntax_left(self):
        text = readme_template(ProjectType.BACKEND, JS, include_ci=False)
        for marker in ("{{", "}}", "{%", "%}"):
            assert marker not in text


class TestConfigStubs:
    def test_biome_is_json(self):
        data = json.loads(biome_config_template())
        assert data["formatter"]["indentStyle"] == "tab"

    def test_link_check_is_json(self):
        data = json.loads(markdown_link_check_config())
        assert data["retryOn429"] is True
        assert data["aliveStatusCodes"] == [200, 206]


# ---------------------------------------------------------------------------
# Jinja2 rendering
# ---------------------------------------------------------------------------


class TestRenderString:
    def test_block_lines_are_trimmed(self):
        source = "a\n{% if flag %}\nb\n{% endif %}\nc\n"
        assert render_string(source, flag=True) == "a\nb\nc\n"
        assert render_string(source, flag=False) == "a\nc\n"

    def test_shell_operators_are_not_escaped(self):
        assert render_string("run: {{ cmd }}", cmd="cd scripts && npm install") == "run: cd scripts && npm install"

    def test_trailing_newline_kept(self):
        assert render_string("x\n") == "x\n"

    def test_missing_context_raises(self):
        with pytest.raises(UndefinedError):
            render_string("{{ nope }}")

    @pytest.mark.parametrize("language", [TS, JS])
    def test_workflow_command_is_literal(self, language: ValidationLanguage):
        text = github_workflow_template(language)
        assert f"run: {validate_command(language)}\n" in text
        assert "&amp;" not in text
