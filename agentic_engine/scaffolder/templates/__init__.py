"""Template catalog for project scaffolding.

Every document the scaffolder writes comes from a pure function in one of the
submodules.  Text with option-dependent sections is rendered through the
shared Jinja2 environment in :mod:`.renderer`.  ``TemplateCatalog`` maps a template identifier to that function
and adapts it to a ``ProjectConfig`` so the generator can render any template
by name::

    catalog = TemplateCatalog()
    text = catalog.render("agents", config)
"""

from __future__ import annotations

from collections.abc import Callable

from agentic_engine.config import ProjectConfig

from .docs import (
    core_beliefs_template,
    design_doc_template,
    design_docs_index_template,
    exec_plan_template,
    product_spec_template,
    product_specs_index_template,
    tech_debt_tracker_template,
)
from .renderer import render_string
from .root_docs import (
    agents_template,
    architecture_template,
    design_template,
    frontend_template,
    has_backend,
    has_frontend,
    plans_template,
    product_sense_template,
    quality_score_template,
    reliability_template,
    security_template,
)
from .tooling import (
    biome_config_template,
    github_workflow_template,
    gitignore_template,
    markdown_link_check_config,
    readme_template,
)
from .validation import (
    script_extension,
    validate_command,
    validation_manifest,
    validation_manifest_template,
    validation_script_template,
)

TemplateFunc = Callable[[ProjectConfig], str]


# ---------------------------------------------------------------------------
# Registry
# ---------------------------------------------------------------------------

_REGISTRY: dict[str, TemplateFunc] = {
    # Root guides
    "agents": lambda c: agents_template(c.project_type),
    "architecture": lambda c: architecture_template(c.project_type),
    "design": lambda c: design_template(),
    "frontend": lambda c: frontend_template(),
    "plans": lambda c: plans_template(),
    "product-sense": lambda c: product_sense_template(),
    "quality-score": lambda c: quality_score_template(),
    "reliability": lambda c: reliability_template(),
    "security": lambda c: security_template(),
    # docs/ knowledge base
    "design-docs-index": lambda c: design_docs_index_template(),
    "core-beliefs": lambda c: core_beliefs_template(),
    "design-doc": lambda c: design_doc_template(),
    "exec-plan": lambda c: exec_plan_template(),
    "tech-debt-tracker": lambda c: tech_debt_tracker_template(),
    "product-specs-index": lambda c: product_specs_index_template(),
    "product-spec": lambda c: product_spec_template(),
    # Validation tooling
    "validation-script": lambda c: validation_script_template(c.validation_language),
    "validation-manifest": lambda c: validation_manifest_template(),
    # CI and repository stubs
    "github-workflow": lambda c: github_workflow_template(c.validation_language),
    "markdown-link-check": lambda c: markdown_link_check_config(),
    "gitignore": lambda c: gitignore_template(),
    "biome": lambda c: biome_config_template(),
    "readme": lambda c: readme_template(
        c.project_type, c.validation_language, c.include_ci
    ),
}


class TemplateCatalog:
    """Looks up and renders templates by identifier.

    Rendering never touches the file system; the generator decides where the
    text ends up.
    """

    def __init__(self, registry: dict[str, TemplateFunc] | None = None) -> None:
        self._registry = dict(registry if registry is not None else _REGISTRY)

    def render(self, name: str, config: ProjectConfig) -> str:
        """Render the template *name* for *config*.

        Raises:
            KeyError: If *name* is not a registered template.
        """
        try:
            func = self._registry[name]
        except KeyError:
            raise KeyError(f"Unknown template: {name!r}") from None
        return func(config)

    def names(self) -> list[str]:
        """Return every registered template identifier, sorted."""
        return sorted(self._registry)

    def __contains__(self, name: object) -> bool:
        return name in self._registry


__all__ = [
    "TemplateCatalog",
    "TemplateFunc",
    "agents_template",
    "architecture_template",
    "biome_config_template",
    "core_beliefs_template",
    "design_doc_template",
    "design_docs_index_template",
    "design_template",
    "exec_plan_template",
    "frontend_template",
    "github_workflow_template",
    "gitignore_template",
    "has_backend",
    "has_frontend",
    "markdown_link_check_config",
    "plans_template",
    "product_sense_template",
    "product_spec_template",
    "product_specs_index_template",
    "quality_score_template",
    "readme_template",
    "reliability_template",
    "render_string",
    "script_extension",
    "security_template",
    "tech_debt_tracker_template",
    "validate_command",
    "validation_manifest",
    "validation_manifest_template",
    "validation_script_template",
]
