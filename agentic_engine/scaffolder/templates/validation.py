"""The structure-validation script shipped inside every scaffolded project.

Two complete variants exist, TypeScript (run through ``tsx``) and plain
JavaScript (run through ``node``).  They are selected wholesale and perform the
same checks as :mod:`agentic_engine.validator`.
"""

from __future__ import annotations

import json

from agentic_engine.config import ValidationLanguage


TYPESCRIPT_COMMAND = "cd scripts && npm install && npm run validate"
JAVASCRIPT_COMMAND = "node scripts/validate-structure.js"

TSX_VERSION = "^4.19.2"

# npm runs package scripts from scripts/; the validator checks the current
# directory, so step back to the project root first.
MANIFEST_VALIDATE_SCRIPT = "cd .. && tsx scripts/validate-structure.ts"


def script_extension(language: ValidationLanguage) -> str:
    """File extension of the emitted validator (``ts`` or ``js``)."""
    return "ts" if language is ValidationLanguage.TYPESCRIPT else "js"


def validate_command(language: ValidationLanguage) -> str:
    """Shell command a developer or CI job runs to validate the structure.

    The TypeScript variant needs its one tooling dependency installed first,
    so the command installs then runs; the JavaScript variant is a single step.
    """
    if language is ValidationLanguage.TYPESCRIPT:
        return TYPESCRIPT_COMMAND
    return JAVASCRIPT_COMMAND


def validation_manifest() -> dict[str, object]:
    """The ``scripts/package.json`` payload for the TypeScript validator."""
    return {
        "name": "validation-scripts",
        "version": "1.0.0",
        "type": "module",
        "scripts": {
            "validate": MANIFEST_VALIDATE_SCRIPT,
        },
        "devDependencies": {
            "tsx": TSX_VERSION,
        },
    }


def validation_manifest_template() -> str:
    return json.dumps(validation_manifest(), indent=2)


def validation_script_template(language: ValidationLanguage) -> str:
    if language is ValidationLanguage.TYPESCRIPT:
        return _TYPESCRIPT_VALIDATOR
    return _JAVASCRIPT_VALIDATOR


# ---------------------------------------------------------------------------
# Script sources
# ---------------------------------------------------------------------------

_TYPESCRIPT_VALIDATOR = r"""#!/usr/bin/env tsx
/**
 * Structure Validation Script
 * Validates the agent-first project structure and documentation
 */

import { existsSync, readdirSync, readFileSync, statSync } from 'node:fs';
import { join } from 'node:path';

const PLACEHOLDER_DOCS = ['index.md', 'template.md', 'core-beliefs.md'];

interface ValidationResult {
	passed: boolean;
	message: string;
}

class StructureValidator {
	private rootDir: string;
	private errors: string[] = [];
	private warnings: string[] = [];

	constructor(rootDir: string = process.cwd()) {
		this.rootDir = rootDir;
	}

	validate(): boolean {
		console.log('🔍 Validating project structure...\n');

		this.validateRootDocs();
		this.validateDocsStructure();
		this.validateCrossLinks();
		this.validateDocFreshness();

		this.printResults();

		return this.errors.length === 0;
	}

	private validateRootDocs(): void {
		const requiredDocs = [
			'AGENTS.md',
			'CLAUDE.md',
			'ARCHITECTURE.md',
			'DESIGN.md',
			'PLANS.md',
			'PRODUCT_SENSE.md',
			'QUALITY_SCORE.md',
			'RELIABILITY.md',
			'SECURITY.md',
		];

		for (const doc of requiredDocs) {
			if (!existsSync(join(this.rootDir, doc))) {
				this.errors.push(`Missing required document: ${doc}`);
			}
		}

		// Validate AGENTS.md and CLAUDE.md are identical
		if (
			existsSync(join(this.rootDir, 'AGENTS.md')) &&
			existsSync(join(this.rootDir, 'CLAUDE.md'))
		) {
			const agentsContent = readFileSync(
				join(this.rootDir, 'AGENTS.md'),
				'utf-8',
			);
			const claudeContent = readFileSync(
				join(this.rootDir, 'CLAUDE.md'),
				'utf-8',
			);

			if (agentsContent !== claudeContent) {
				this.errors.push('AGENTS.md and CLAUDE.md must be identical');
			}
		}

		// Validate AGENTS.md is roughly 100 lines (allow some variance)
		if (existsSync(join(this.rootDir, 'AGENTS.md'))) {
			const agentsContent = readFileSync(
				join(this.rootDir, 'AGENTS.md'),
				'utf-8',
			);
			const lineCount = agentsContent.split('\n').length;

			if (lineCount > 150) {
				this.warnings.push(
					`AGENTS.md is ${lineCount} lines (recommended: ~100 lines). Consider moving details to docs/`,
				);
			}
		}
	}

	private validateDocsStructure(): void {
		const requiredDirs = [
			'docs/design-docs',
			'docs/exec-plans/active',
			'docs/exec-plans/completed',
			'docs/product-specs',
			'docs/references',
			'docs/generated',
		];

		for (const dir of requiredDirs) {
			if (!existsSync(join(this.rootDir, dir))) {
				this.errors.push(`Missing required directory: ${dir}`);
			}
		}

		// Validate index files exist
		const requiredIndexes = [
			'docs/design-docs/index.md',
			'docs/product-specs/index.md',
		];

		for (const index of requiredIndexes) {
			if (!existsSync(join(this.rootDir, index))) {
				this.warnings.push(`Missing index file: ${index}`);
			}
		}
	}

	private validateCrossLinks(): void {
		// Basic validation: check that referenced files exist
		const agentsPath = join(this.rootDir, 'AGENTS.md');
		if (!existsSync(agentsPath)) return;

		const agentsContent = readFileSync(agentsPath, 'utf-8');
		const linkRegex = /\[([^\]]+)\]\(([^)]+)\)/g;
		let match: RegExpExecArray | null;

		while ((match = linkRegex.exec(agentsContent)) !== null) {
			const linkPath = match[2];

			// Skip external links (any URL scheme)
			if (/^[a-zA-Z][a-zA-Z0-9+.-]*:/.test(linkPath)) continue;

			const target = linkPath.split('#')[0];
			if (!target) continue;

			const fullPath = join(this.rootDir, target);
			if (!existsSync(fullPath)) {
				this.warnings.push(
					`Broken link in AGENTS.md: ${linkPath}`,
				);
			}
		}
	}

	private validateDocFreshness(): void {
		// Check that design docs have been updated recently
		const designDocsDir = join(this.rootDir, 'docs/design-docs');
		if (!existsSync(designDocsDir)) return;

		const files = readdirSync(designDocsDir).filter((f) =>
			f.endsWith('.md') && !PLACEHOLDER_DOCS.includes(f),
		);

		if (files.length === 0) {
			this.warnings.push(
				'No design documents found in docs/design-docs/',
			);
			return;
		}

		const now = Date.now();
		const sixMonths = 6 * 30 * 24 * 60 * 60 * 1000;

		for (const file of files) {
			const filePath = join(designDocsDir, file);
			const stats = statSync(filePath);
			const age = now - stats.mtimeMs;

			if (age > sixMonths) {
				this.warnings.push(
					`Design doc hasn't been updated in 6+ months: ${file}`,
				);
			}
		}
	}

	private printResults(): void {
		console.log('\n' + '='.repeat(60));

		if (this.errors.length === 0 && this.warnings.length === 0) {
			console.log('✅ All validation checks passed!');
		} else {
			if (this.errors.length > 0) {
				console.log(`\n❌ Errors (${this.errors.length}):\n`);
				for (const error of this.errors) {
					console.log(`  - ${error}`);
				}
			}

			if (this.warnings.length > 0) {
				console.log(`\n⚠️  Warnings (${this.warnings.length}):\n`);
				for (const warning of this.warnings) {
					console.log(`  - ${warning}`);
				}
			}
		}

		console.log('\n' + '='.repeat(60) + '\n');
	}
}

// Run validation
const validator = new StructureValidator();
const success = validator.validate();

process.exit(success ? 0 : 1);
"""


_JAVASCRIPT_VALIDATOR = r"""#!/usr/bin/env node
/**
 * Structure Validation Script
 * Validates the agent-first project structure and documentation
 */

import { existsSync, readdirSync, readFileSync, statSync } from 'node:fs';
import { join } from 'node:path';

const PLACEHOLDER_DOCS = ['index.md', 'template.md', 'core-beliefs.md'];

class StructureValidator {
	constructor(rootDir = process.cwd()) {
		this.rootDir = rootDir;
		this.errors = [];
		this.warnings = [];
	}

	validate() {
		console.log('🔍 Validating project structure...\n');

		this.validateRootDocs();
		this.validateDocsStructure();
		this.validateCrossLinks();
		this.validateDocFreshness();

		this.printResults();

		return this.errors.length === 0;
	}

	validateRootDocs() {
		const requiredDocs = [
			'AGENTS.md',
			'CLAUDE.md',
			'ARCHITECTURE.md',
			'DESIGN.md',
			'PLANS.md',
			'PRODUCT_SENSE.md',
			'QUALITY_SCORE.md',
			'RELIABILITY.md',
			'SECURITY.md',
		];

		for (const doc of requiredDocs) {
			if (!existsSync(join(this.rootDir, doc))) {
				this.errors.push(`Missing required document: ${doc}`);
			}
		}

		// Validate AGENTS.md and CLAUDE.md are identical
		if (
			existsSync(join(this.rootDir, 'AGENTS.md')) &&
			existsSync(join(this.rootDir, 'CLAUDE.md'))
		) {
			const agentsContent = readFileSync(
				join(this.rootDir, 'AGENTS.md'),
				'utf-8',
			);
			const claudeContent = readFileSync(
				join(this.rootDir, 'CLAUDE.md'),
				'utf-8',
			);

			if (agentsContent !== claudeContent) {
				this.errors.push('AGENTS.md and CLAUDE.md must be identical');
			}
		}

		// Validate AGENTS.md is roughly 100 lines (allow some variance)
		if (existsSync(join(this.rootDir, 'AGENTS.md'))) {
			const agentsContent = readFileSync(
				join(this.rootDir, 'AGENTS.md'),
				'utf-8',
			);
			const lineCount = agentsContent.split('\n').length;

			if (lineCount > 150) {
				this.warnings.push(
					`AGENTS.md is ${lineCount} lines (recommended: ~100 lines). Consider moving details to docs/`,
				);
			}
		}
	}

	validateDocsStructure() {
		const requiredDirs = [
			'docs/design-docs',
			'docs/exec-plans/active',
			'docs/exec-plans/completed',
			'docs/product-specs',
			'docs/references',
			'docs/generated',
		];

		for (const dir of requiredDirs) {
			if (!existsSync(join(this.rootDir, dir))) {
				this.errors.push(`Missing required directory: ${dir}`);
			}
		}

		// Validate index files exist
		const requiredIndexes = [
			'docs/design-docs/index.md',
			'docs/product-specs/index.md',
		];

		for (const index of requiredIndexes) {
			if (!existsSync(join(this.rootDir, index))) {
				this.warnings.push(`Missing index file: ${index}`);
			}
		}
	}

	validateCrossLinks() {
		// Basic validation: check that referenced files exist
		const agentsPath = join(this.rootDir, 'AGENTS.md');
		if (!existsSync(agentsPath)) return;

		const agentsContent = readFileSync(agentsPath, 'utf-8');
		const linkRegex = /\[([^\]]+)\]\(([^)]+)\)/g;
		let match;

		while ((match = linkRegex.exec(agentsContent)) !== null) {
			const linkPath = match[2];

			// Skip external links (any URL scheme)
			if (/^[a-zA-Z][a-zA-Z0-9+.-]*:/.test(linkPath)) continue;

			const target = linkPath.split('#')[0];
			if (!target) continue;

			const fullPath = join(this.rootDir, target);
			if (!existsSync(fullPath)) {
				this.warnings.push(
					`Broken link in AGENTS.md: ${linkPath}`,
				);
			}
		}
	}

	validateDocFreshness() {
		// Check that design docs have been updated recently
		const designDocsDir = join(this.rootDir, 'docs/design-docs');
		if (!existsSync(designDocsDir)) return;

		const files = readdirSync(designDocsDir).filter((f) =>
			f.endsWith('.md') && !PLACEHOLDER_DOCS.includes(f),
		);

		if (files.length === 0) {
			this.warnings.push(
				'No design documents found in docs/design-docs/',
			);
			return;
		}

		const now = Date.now();
		const sixMonths = 6 * 30 * 24 * 60 * 60 * 1000;

		for (const file of files) {
			const filePath = join(designDocsDir, file);
			const stats = statSync(filePath);
			const age = now - stats.mtimeMs;

			if (age > sixMonths) {
				this.warnings.push(
					`Design doc hasn't been updated in 6+ months: ${file}`,
				);
			}
		}
	}

	printResults() {
		console.log('\n' + '='.repeat(60));

		if (this.errors.length === 0 && this.warnings.length === 0) {
			console.log('✅ All validation checks passed!');
		} else {
			if (this.errors.length > 0) {
				console.log(`\n❌ Errors (${this.errors.length}):\n`);
				for (const error of this.errors) {
					console.log(`  - ${error}`);
				}
			}

			if (this.warnings.length > 0) {
				console.log(`\n⚠️  Warnings (${this.warnings.length}):\n`);
				for (const warning of this.warnings) {
					console.log(`  - ${warning}`);
				}
			}
		}

		console.log('\n' + '='.repeat(60) + '\n');
	}
}

// Run validation
const validator = new StructureValidator();
const success = validator.validate();

process.exit(success ? 0 : 1);
"""
