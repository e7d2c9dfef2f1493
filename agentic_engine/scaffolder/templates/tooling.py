"""Tooling stubs and the project README.

The CI workflow and the README both embed the validate command for the chosen
validator variant.  The README also mentions FRONTEND.md only for project types
with a UI layer, and describes the CI checks only when workflows are generated.
"""

from __future__ import annotations

from agentic_engine.config import ProjectType, ValidationLanguage

from .renderer import render_string
from .root_docs import has_frontend
from .validation import script_extension, validate_command


_GITHUB_WORKFLOW = """\
name: Validate Documentation Structure

on:
  pull_request:
    branches: [main, develop]
    paths:
      - 'docs/**'
      - 'AGENTS.md'
      - 'CLAUDE.md'
      - 'ARCHITECTURE.md'
      - '*.md'
  push:
    branches: [main, develop]
  schedule:
    # Run weekly to catch stale documentation
    - cron: '0 0 * * 0'

jobs:
  validate-structure:
    runs-on: ubuntu-latest

    steps:
      - name: Checkout code
        uses: actions/checkout@v4

      - name: Setup Node.js
        uses: actions/setup-node@v4
        with:
          node-version: '20'

      - name: Run structure validation
        run: {{ validate_command }}

      - name: Check for broken links
        uses: gaurav-nelson/github-action-markdown-link-check@v1
        with:
          use-quiet-mode: 'yes'
          config-file: '.github/markdown-link-check-config.json'

  check-freshness:
    runs-on: ubuntu-latest

    steps:
      - name: Checkout code
        uses: actions/checkout@v4
        with:
          fetch-depth: 0  # Fetch full history for freshness checks

      - name: Check AGENTS.md and CLAUDE.md are identical
        run: |
          if ! cmp -s AGENTS.md CLAUDE.md; then
            echo "❌ AGENTS.md and CLAUDE.md must be identical"
            exit 1
          fi
          echo "✅ AGENTS.md and CLAUDE.md are identical"

      - name: Validate AGENTS.md size
        run: |
          lines=$(wc -l < AGENTS.md)
          if [ $lines -gt 150 ]; then
            echo "⚠️  AGENTS.md has $lines lines (recommended: ~100)"
            echo "Consider moving details to docs/ directory"
          else
            echo "✅ AGENTS.md size is appropriate ($lines lines)"
          fi
"""


_README = """\
# Project Name

**Agent-first development structure for [project description]**

This project uses an agent-first development approach based on [OpenAI's harness engineering principles](https://openai.com/index/harness-engineering/).

## 🏗️ Project Structure

```
.
├── AGENTS.md              # Agent development guide (table of contents)
├── CLAUDE.md              # Identical to AGENTS.md (for Claude Code)
├── ARCHITECTURE.md        # System architecture overview
├── DESIGN.md              # Design principles
{% if has_frontend %}
├── FRONTEND.md            # Frontend guidelines
{% endif %}
├── PLANS.md               # Planning guidelines
├── PRODUCT_SENSE.md       # Product principles
├── QUALITY_SCORE.md       # Quality metrics tracker
├── RELIABILITY.md         # Reliability standards
├── SECURITY.md            # Security guidelines
├── docs/
│   ├── design-docs/       # Design documentation
│   ├── exec-plans/        # Execution plans (active & completed)
│   ├── product-specs/     # Product specifications
│   ├── references/        # External library docs for LLMs
│   └── generated/         # Auto-generated documentation
└── scripts/
    └── validate-structure.{{ script_extension }}  # Structure validation

```

## 🚀 Getting Started

### 1. Initialize Your Application Framework

This structure is framework-agnostic. Choose and initialize your preferred framework:

**Frontend:**
```bash
# React + Vite
npm create vite@latest

# Next.js
npx create-next-app@latest

# SvelteKit
npm create svelte@latest
```

**Backend:**
```bash
# Express
npm create express-app

# Fastify
npm init fastify

# NestJS
npm i -g @nestjs/cli && nest new project-name
```

### 2. Customize Documentation

1. Review and customize [`AGENTS.md`](./AGENTS.md) and [`CLAUDE.md`](./CLAUDE.md)
2. Update [`ARCHITECTURE.md`](./ARCHITECTURE.md) with your system domains
3. Add your first design doc in [`docs/design-docs/`](./docs/design-docs/)
4. Document your tech stack choices

### 3. Validate Structure

Run the validation script to ensure the structure is correct:

```bash
{{ validate_command }}
```

## 🤖 Agent Development Workflow

1. **Read Documentation** - Start with [`AGENTS.md`](./AGENTS.md) for context
2. **Plan** - Create execution plans for complex work in [`docs/exec-plans/`](./docs/exec-plans/)
3. **Design** - Document architectural decisions in [`docs/design-docs/`](./docs/design-docs/)
4. **Implement** - Follow architectural constraints and quality standards
5. **Validate** - Run tests and validation scripts
6. **Review** - Get agent and human feedback
7. **Document** - Update docs based on implementation learnings

## 📚 Core Principles

1. **Repository is the source of truth** - If it's not in the repo, it doesn't exist to agents
2. **Progressive disclosure** - AGENTS.md is a map, detailed docs are in `docs/`
3. **Enforce mechanically** - Use linters and tests, not just manual review
4. **Agent legibility first** - Optimize for agent reasoning
5. **Continuous cleanup** - Fix drift immediately, don't let debt compound

See [`docs/design-docs/core-beliefs.md`](./docs/design-docs/core-beliefs.md) for detailed principles.

## 🔍 Validation

### Structure Validation
```bash
{{ validate_command }}
```

{% if include_ci %}
### CI/CD
GitHub Actions automatically validate:
- Documentation structure
- Broken links
- AGENTS.md and CLAUDE.md are identical
- Doc freshness
{% else %}
### CI/CD
No CI workflows were generated. Add the structure validation command above to
your pipeline to keep the documentation layout enforced.
{% endif %}

## 📖 Documentation

- **[`AGENTS.md`](./AGENTS.md)** - Start here for agent development
- **[`ARCHITECTURE.md`](./ARCHITECTURE.md)** - System architecture
- **[`SECURITY.md`](./SECURITY.md)** - Security guidelines
- **[`QUALITY_SCORE.md`](./QUALITY_SCORE.md)** - Quality metrics
- **[`docs/design-docs/`](./docs/design-docs/)** - Design decisions
- **[`docs/exec-plans/`](./docs/exec-plans/)** - Execution plans

## 🛠️ Development

[Add your development instructions here]

```bash
# Install dependencies
npm install

# Run development server
npm run dev

# Run tests
npm test

# Build
npm run build
```

## 🤝 Contributing

This project is optimized for agent-first development:

1. Review [`AGENTS.md`](./AGENTS.md) before contributing
2. Follow architectural constraints in [`ARCHITECTURE.md`](./ARCHITECTURE.md)
3. Adhere to security guidelines in [`SECURITY.md`](./SECURITY.md)
4. Maintain quality standards in [`QUALITY_SCORE.md`](./QUALITY_SCORE.md)

## 📝 License

[Your License Here]

---

**Built with agent-first development principles inspired by [OpenAI's harness engineering](https://openai.com/index/harness-engineering/)**
"""


_GITIGNORE = """\
# Dependencies
node_modules/
.pnp
.pnp.js

# Testing
coverage/
.nyc_output

# Production
build/
dist/
*.log

# Environment variables
.env
.env.local
.env.development.local
.env.test.local
.env.production.local

# IDE
.vscode/
.idea/
*.swp
*.swo
*~

# OS
.DS_Store
Thumbs.db

# Generated files (but keep the directory)
docs/generated/*
!docs/generated/.gitkeep
"""


_BIOME = """\
{
  "$schema": "https://biomejs.dev/schemas/1.9.4/schema.json",
  "vcs": {
    "enabled": true,
    "clientKind": "git",
    "useIgnoreFile": true
  },
  "files": {
    "ignoreUnknown": false,
    "ignore": ["node_modules", "dist", "build", ".next", "coverage"]
  },
  "formatter": {
    "enabled": true,
    "indentStyle": "tab",
    "indentWidth": 2,
    "lineWidth": 80
  },
  "organizeImports": {
    "enabled": true
  },
  "linter": {
    "enabled": true,
    "rules": {
      "recommended": true,
      "complexity": {
        "noExtraBooleanCast": "error",
        "noMultipleSpacesInRegularExpressionLiterals": "error",
        "noUselessCatch": "error",
        "noWith": "error"
      },
      "correctness": {
        "noConstAssign": "error",
        "noConstantCondition": "error",
        "noEmptyCharacterClassInRegex": "error",
        "noEmptyPattern": "error",
        "noGlobalObjectCalls": "error",
        "noInvalidConstructorSuper": "error",
        "noInvalidNewBuiltin": "error",
        "noNonoctalDecimalEscape": "error",
        "noPrecisionLoss": "error",
        "noSelfAssign": "error",
        "noSetterReturn": "error",
        "noSwitchDeclarations": "error",
        "noUndeclaredVariables": "error",
        "noUnreachable": "error",
        "noUnreachableSuper": "error",
        "noUnsafeFinally": "error",
        "noUnsafeOptionalChaining": "error",
        "noUnusedLabels": "error",
        "noUnusedVariables": "warn",
        "useIsNan": "error",
        "useValidForDirection": "error",
        "useYield": "error"
      },
      "style": {
        "noNamespace": "error",
        "useAsConstAssertion": "error",
        "useBlockStatements": "off",
        "useConsistentArrayType": "off",
        "useForOf": "warn",
        "useShorthandFunctionType": "error"
      },
      "suspicious": {
        "noAsyncPromiseExecutor": "error",
        "noCatchAssign": "error",
        "noClassAssign": "error",
        "noCompareNegZero": "error",
        "noControlCharactersInRegex": "error",
        "noDebugger": "error",
        "noDuplicateCase": "error",
        "noDuplicateClassMembers": "error",
        "noDuplicateObjectKeys": "error",
        "noDuplicateParameters": "error",
        "noEmptyBlockStatements": "error",
        "noExplicitAny": "warn",
        "noExtraNonNullAssertion": "error",
        "noFallthroughSwitchClause": "error",
        "noFunctionAssign": "error",
        "noGlobalAssign": "error",
        "noImportAssign": "error",
        "noMisleadingCharacterClass": "error",
        "noMisleadingInstantiator": "error",
        "noPrototypeBuiltins": "error",
        "noRedeclare": "error",
        "noShadowRestrictedNames": "error",
        "noUnsafeDeclarationMerging": "error",
        "noUnsafeNegation": "error",
        "useGetterReturn": "error",
        "useValidTypeof": "error"
      }
    }
  },
  "javascript": {
    "formatter": {
      "quoteStyle": "single",
      "trailingCommas": "all",
      "semicolons": "always",
      "arrowParentheses": "always"
    }
  }
}
"""


_MARKDOWN_LINK_CHECK = """\
{
  "ignorePatterns": [
    {
      "pattern": "^http://localhost"
    },
    {
      "pattern": "^https://localhost"
    }
  ],
  "replacementPatterns": [],
  "httpHeaders": [],
  "timeout": "5s",
  "retryOn429": true,
  "retryCount": 3,
  "fallbackRetryDelay": "5s",
  "aliveStatusCodes": [200, 206]
}
"""


def github_workflow_template(language: ValidationLanguage) -> str:
    return render_string(_GITHUB_WORKFLOW, validate_command=validate_command(language))


def markdown_link_check_config() -> str:
    return _MARKDOWN_LINK_CHECK


def gitignore_template() -> str:
    return _GITIGNORE


def biome_config_template() -> str:
    return _BIOME


def readme_template(
    project_type: ProjectType,
    language: ValidationLanguage,
    include_ci: bool = True,
) -> str:
    """Render README.md for the selected options."""
    return render_string(
        _README,
        has_frontend=has_frontend(project_type),
        script_extension=script_extension(language),
        validate_command=validate_command(language),
        include_ci=include_ci,
    )
