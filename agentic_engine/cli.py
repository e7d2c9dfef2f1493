"""Command-line entry point for agentic-engine.

Usage::

    agentic-engine                       # interactive questionnaire, then scaffold
    agentic-engine init --path ./svc --type backend --validation javascript --yes
    agentic-engine validate ./svc        # check an existing project
    python -m agentic_engine ...
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import Any

from pydantic import ValidationError
from rich.markup import escape
from rich.prompt import Confirm, Prompt

from agentic_engine import __version__
from agentic_engine.config import ProjectConfig, ProjectType, ValidationLanguage
from agentic_engine.errors import AgenticEngineError, FileSystemError, UserCancelled
from agentic_engine.scaffolder import ProjectGenerator
from agentic_engine.scaffolder.templates import validate_command
from agentic_engine.utils import (
    console,
    create_progress,
    print_banner,
    print_error,
    print_next_steps,
    print_report,
    print_summary_table,
    print_warning,
)
from agentic_engine.validator import StructureValidator


# ---------------------------------------------------------------------------
# Questionnaire
# ---------------------------------------------------------------------------


def collect_config(defaults: ProjectConfig) -> ProjectConfig:
    """Ask the five scaffolding questions, using *defaults* for each answer.

    Raises:
        UserCancelled: If the user interrupts the session (Ctrl-C / Ctrl-D).
    """
    try:
        path = Prompt.ask(
            "Where should we create your project?",
            default=str(defaults.target_path),
            console=console,
        )
        for option in ProjectType:
            console.print(f"  [cyan]{option.value}[/cyan]  {option.label}")
        project_type = Prompt.ask(
            "What type of project?",
            choices=[t.value for t in ProjectType],
            default=defaults.project_type.value,
            console=console,
        )
        for option in ValidationLanguage:
            console.print(f"  [cyan]{option.value}[/cyan]  {option.label}")
        language = Prompt.ask(
            "Validation script language?",
            choices=[v.value for v in ValidationLanguage],
            default=defaults.validation_language.value,
            console=console,
        )
        observability = Confirm.ask(
            "Include observability stack templates?",
            default=defaults.include_observability,
            console=console,
        )
        include_ci = Confirm.ask(
            "Include GitHub Actions workflows?",
            default=defaults.include_ci,
            console=console,
        )
    except (KeyboardInterrupt, EOFError):
        raise UserCancelled() from None

    return ProjectConfig(
        target_path=Path(path),
        project_type=ProjectType(project_type),
        validation_language=ValidationLanguage(language),
        include_observability=observability,
        include_ci=include_ci,
    )


# ---------------------------------------------------------------------------
# Commands
# ---------------------------------------------------------------------------


def _has_entries(target: Path) -> bool:
    """Return True when *target* is an existing directory with any entries."""
    try:
        return target.is_dir() and any(target.iterdir())
    except OSError as exc:
        raise FileSystemError(target, exc.strerror or str(exc)) from exc


def run_init(args: argparse.Namespace) -> int:
    """Collect the configuration and scaffold the project."""
    overrides: dict[str, Any] = {
        "target_path": Path(args.path) if args.path else None,
        "project_type": args.project_type,
        "validation_language": args.validation,
        "include_observability": args.observability,
        "include_ci": args.ci,
    }
    try:
        defaults = ProjectConfig.from_env(**overrides)
    except (ValidationError, ValueError) as exc:
        print_error(f"Invalid configuration: {escape(str(exc))}")
        return 2

    print_banner()
    config = defaults if args.yes else collect_config(defaults)

    print_summary_table(
        {
            "Path": str(config.target_path),
            "Project type": config.project_type.label,
            "Validation": config.validation_language.label,
            "Observability": "yes" if config.include_observability else "no",
            "CI workflows": "yes" if config.include_ci else "no",
        },
        title="Project",
    )
    if _has_entries(Path(config.target_path)):
        print_warning("Target directory is not empty; generated files will be overwritten.")

    generator = ProjectGenerator(config)
    with create_progress() as progress:
        task = progress.add_task("Creating project structure", total=None)
        result = generator.generate(
            on_progress=lambda message: progress.update(task, description=message)
        )

    if args.verbose:
        for path in result.files:
            console.print(f"  [dim]wrote[/dim] {escape(path)}")
    console.print(f"[green]Project created successfully![/green] ({len(result.files)} files)")
    print_next_steps(config, validate_command(config.validation_language))
    return 0


def run_validate(args: argparse.Namespace) -> int:
    """Validate an existing project; exit status reflects errors only."""
    root = Path(args.root)
    if not root.is_dir():
        print_error(f"Not a directory: {escape(str(root))}")
        return 2

    report = StructureValidator(root).validate()
    print_report(report)
    return 0 if report.passed else 1


# ---------------------------------------------------------------------------
# Argument parsing
# ---------------------------------------------------------------------------


def _add_init_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--path", "-p",
        default=None,
        help="Where to create the project (default: ./my-agent-project)",
    )
    parser.add_argument(
        "--type", "-t",
        dest="project_type",
        choices=[t.value for t in ProjectType],
        default=None,
        help="Project type (default: fullstack)",
    )
    parser.add_argument(
        "--validation",
        choices=[v.value for v in ValidationLanguage],
        default=None,
        help="Validation script language (default: typescript)",
    )
    parser.add_argument(
        "--observability",
        action=argparse.BooleanOptionalAction,
        default=None,
        help="Include observability stack templates (default: yes)",
    )
    parser.add_argument(
        "--ci",
        action=argparse.BooleanOptionalAction,
        default=None,
        help="Include GitHub Actions workflows (default: yes)",
    )
    parser.add_argument(
        "--yes", "-y",
        action="store_true",
        help="Skip the questionnaire and use flags, environment, and defaults",
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="List every file written",
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="agentic-engine",
        description="Scaffold an agent-first project structure",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=(
            "Examples:\n"
            "  agentic-engine\n"
            "  agentic-engine init --path ./svc --type backend --no-ci --yes\n"
            "  agentic-engine validate ./svc\n"
        ),
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")

    subparsers = parser.add_subparsers(dest="command", required=True)

    init_parser = subparsers.add_parser("init", help="Scaffold a new project (default)")
    _add_init_arguments(init_parser)
    init_parser.set_defaults(handler=run_init)

    validate_parser = subparsers.add_parser("validate", help="Validate an existing project")
    validate_parser.add_argument(
        "root",
        nargs="?",
        default=".",
        help="Project root to validate (default: current directory)",
    )
    validate_parser.set_defaults(handler=run_validate)

    return parser


_TOP_LEVEL_WORDS = frozenset({"init", "validate", "-h", "--help", "--version"})


def main(argv: list[str] | None = None) -> int:
    """CLI entry point for ``agentic-engine`` and ``python -m agentic_engine``."""
    argv = list(sys.argv[1:] if argv is None else argv)
    if not argv or argv[0] not in _TOP_LEVEL_WORDS:
        argv.insert(0, "init")

    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        return args.handler(args)
    except UserCancelled as exc:
        console.print()
        print_warning(str(exc))
        return 1
    except AgenticEngineError as exc:
        print_error(f"Error: {escape(str(exc))}")
        return 1


if __name__ == "__main__":
    sys.exit(main())
