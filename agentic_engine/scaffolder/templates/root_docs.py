"""Root-level guide documents.

Every project gets AGENTS.md (mirrored to CLAUDE.md), ARCHITECTURE.md and the
six principle documents.  FRONTEND.md is only emitted for project types that
have a UI layer, and the agent guide links to it under the same condition.
"""

from __future__ import annotations

from agentic_engine.config import ProjectType

from .renderer import render_string


# ---------------------------------------------------------------------------
# Selection helpers
# ---------------------------------------------------------------------------


def has_frontend(project_type: ProjectType) -> bool:
    """Return ``True`` for project types that ship a UI layer."""
    return project_type in (ProjectType.FULLSTACK, ProjectType.FRONTEND)


def has_backend(project_type: ProjectType) -> bool:
    """Return ``True`` for project types that ship a server layer."""
    return project_type in (ProjectType.FULLSTACK, ProjectType.BACKEND)


# ---------------------------------------------------------------------------
# Template text
# ---------------------------------------------------------------------------

_AGENTS = """\
# Agent Development Guide

**This file serves as the table of contents for agent development in this repository.**

Humans steer. Agents execute.

## Quick Reference

- **Architecture:** See [ARCHITECTURE.md](./ARCHITECTURE.md)
- **Design Principles:** See [DESIGN.md](./DESIGN.md)
- **Security:** See [SECURITY.md](./SECURITY.md)
- **Quality Standards:** See [QUALITY_SCORE.md](./QUALITY_SCORE.md)
- **Reliability:** See [RELIABILITY.md](./RELIABILITY.md)
- **Product Sense:** See [PRODUCT_SENSE.md](./PRODUCT_SENSE.md)
- **Planning:** See [PLANS.md](./PLANS.md)
{% if has_frontend %}
- **Frontend:** See [FRONTEND.md](./FRONTEND.md)
{% endif %}


## Documentation Structure

### Design Documents
Location: `docs/design-docs/`

All design decisions and architectural choices are documented here. Before implementing features:
1. Check for existing design docs
2. Create new design docs for significant changes
3. Link to relevant designs in your PRs

See: [docs/design-docs/index.md](./docs/design-docs/index.md)

### Execution Plans
Location: `docs/exec-plans/`

Complex work is broken down into execution plans:
- **Active plans:** `docs/exec-plans/active/`
- **Completed plans:** `docs/exec-plans/completed/`
- **Tech debt tracker:** `docs/exec-plans/tech-debt-tracker.md`

See: [PLANS.md](./PLANS.md) for planning guidelines.

### Product Specifications
Location: `docs/product-specs/`

Product requirements and feature specifications live here. Before building:
1. Review relevant product specs
2. Ask clarifying questions if specs are incomplete
3. Update specs based on implementation learnings

See: [docs/product-specs/index.md](./docs/product-specs/index.md)

### Reference Documentation
Location: `docs/references/`

External library documentation optimized for LLM consumption. When integrating new libraries:
1. Extract key documentation
2. Format for agent readability
3. Store in `docs/references/[library-name]-llms.txt`

### Generated Documentation
Location: `docs/generated/`

Auto-generated documentation (schemas, API docs, etc.). This directory is maintained by automation.

## Core Principles

1. **Repository is the source of truth** - If it's not in the repo, it doesn't exist to agents
2. **Progressive disclosure** - Start with this file, navigate to deeper sources
3. **Enforce mechanically** - Use linters and tests, not manual review
4. **Agent legibility first** - Optimize for agent reasoning, not just human readability
5. **Continuous cleanup** - Fix patterns as soon as they drift, don't let debt compound

## Workflow

1. **Context gathering:** Read relevant docs before coding
2. **Plan:** Create execution plans for complex work
3. **Implement:** Follow architectural constraints and quality standards
4. **Validate:** Run tests, linters, and validation scripts
5. **Review:** Get agent and human feedback
6. **Iterate:** Respond to feedback, fix issues
7. **Document:** Update design docs and specs based on learnings

## Validation

Before opening PRs, ensure:
- [ ] All tests pass
- [ ] Linters pass
- [ ] Documentation is updated
- [ ] Architectural constraints are satisfied
- [ ] Security guidelines are followed

Run validation: `npm run validate` or `node scripts/validate-structure.js`

## Getting Help

When stuck:
1. Check [docs/design-docs/core-beliefs.md](./docs/design-docs/core-beliefs.md)
2. Review similar implementations in the codebase
3. Check [docs/exec-plans/tech-debt-tracker.md](./docs/exec-plans/tech-debt-tracker.md) for known issues
4. Ask humans for clarification on requirements

---

*This file is intentionally kept short (~100 lines). For detailed guidance, follow the links above.*
"""


_ARCHITECTURE = """\
# Architecture Overview

**Top-level map of system domains and package layering.**

## System Domains

This section will be populated as your application grows. Document major domains here (e.g., Auth, Users, Payments, etc.).

### Example Domain: [Domain Name]

**Purpose:** Brief description

**Boundaries:**
- Owns: What this domain is responsible for
- Depends on: What other domains it uses
- Used by: What domains depend on it

**Key files:**
- `src/[domain]/` - Main implementation

## Layered Architecture

Within each domain, code follows a strict layering model:

```
Types → Config → Repository → Service → Runtime → UI
         ↑
    Providers (cross-cutting concerns)
```

### Layer Responsibilities

1. **Types** - Data shapes, interfaces, domain models
2. **Config** - Configuration schemas and defaults
3. **Repository** - Data access layer (database, external APIs)
4. **Service** - Business logic
5. **Runtime** - Application runtime concerns (initialization, shutdown)
6. **UI** - User interface components

### Providers (Cross-cutting)

Cross-cutting concerns enter through explicit Provider interfaces:
- Authentication
- Logging/Telemetry
- Feature flags
- External connectors

### Dependency Rules

✅ **Allowed:** Forward dependencies (Types → Config → Repo → Service → Runtime → UI)
❌ **Forbidden:** Backward dependencies (UI cannot import from Service directly without going through Runtime)

These rules are enforced mechanically via custom linters.

## Technology Choices

{% if has_frontend %}
### Frontend

[To be determined - document your framework choice]

{% endif %}
{% if has_backend %}
### Backend

[To be determined - document your framework choice]

{% endif %}
### Infrastructure

[Document infrastructure choices as they're made]

## Architectural Constraints

1. **Parsing at boundaries** - All external data must be validated/parsed at system boundaries
2. **No circular dependencies** - Enforce strict DAG structure
3. **Explicit cross-cutting** - Cross-cutting concerns go through Provider interfaces
4. **Testability** - All layers must be independently testable

## Decision Log

| Date | Decision | Rationale | Status |
|------|----------|-----------|--------|
| TBD  | Example  | Why      | Active |

---

*Keep this document updated as architectural decisions are made. Link to detailed design docs for complex changes.*
"""


_DESIGN = """\
# Design Principles

**Core design beliefs and patterns for this codebase.**

## Philosophy

1. **Simple over clever** - Readable code beats optimized code
2. **Explicit over implicit** - Make behavior obvious
3. **Boring over exciting** - Prefer proven technologies
4. **Strict boundaries** - Enforce constraints mechanically

## Code Organization

### File Structure
- One primary export per file
- Co-locate related code (tests next to implementation)
- Group by domain, not by type

### Naming Conventions
- Verbose and descriptive: `calculateTotalRevenue()` not `calcRev()`
- Consistent patterns across domains
- No abbreviations unless universally understood

### Comments
- Comment **why**, not **what**
- Explain business logic and constraints
- Document security-critical sections
- Avoid obvious comments

## Error Handling

1. **Fail fast** - Validate inputs early
2. **Explicit errors** - Use typed error objects
3. **Graceful degradation** - Never fail silently
4. **Comprehensive logging** - All errors are logged with context

## Testing Philosophy

1. **Real environments over mocks** - Use Docker for databases, Redis, etc.
2. **Integration tests preferred** - Test real behavior, not mocked behavior
3. **Test the contract** - Focus on behavior, not implementation
4. **Fail meaningfully** - Tests should fail when logic breaks

## Security Principles

1. **Zero trust** - Sanitize all user inputs
2. **Least privilege** - Minimal access rights
3. **No secrets in code** - Use environment variables
4. **Defense in depth** - Multiple layers of security

See [SECURITY.md](./SECURITY.md) for detailed security guidelines.

## Performance Philosophy

1. **Measure before optimizing** - No premature optimization
2. **Optimize for maintainability** - Clear code is fast enough
3. **Scale when needed** - Don't over-engineer for imaginary scale

## Dependencies

1. **Minimize dependencies** - Prefer standard library
2. **Agent-legible libraries** - Choose well-documented, stable libraries
3. **Internalize when needed** - Sometimes it's cheaper to implement than integrate

---

*These principles guide all code written by humans and agents in this repository.*
"""


_FRONTEND = """\
# Frontend Development Guide

**Guidelines for building user interfaces in this project.**

## Framework

[Document your chosen framework here - React, Vue, Svelte, etc.]

## Component Architecture

### Component Organization
```
components/
├── ui/           # Reusable UI primitives (buttons, inputs, etc.)
├── features/     # Feature-specific components
└── layouts/      # Page layouts and shells
```

### Component Guidelines

1. **Single Responsibility** - Each component does one thing well
2. **Props over State** - Prefer passing data down
3. **Composition over Inheritance** - Build complex UIs from simple pieces
4. **Accessibility First** - ARIA labels, keyboard navigation, screen readers

## State Management

[Document state management approach - Context, Redux, Zustand, etc.]

### State Principles
1. **Minimize global state** - Keep state as local as possible
2. **Immutable updates** - Never mutate state directly
3. **Derived state** - Compute from source of truth, don't duplicate

## Styling

[Document styling approach - CSS Modules, Tailwind, Styled Components, etc.]

### Styling Guidelines
1. **Consistent design tokens** - Use variables for colors, spacing, typography
2. **Mobile-first** - Design for small screens first
3. **Performance** - Minimize CSS bundle size

## Data Fetching

[Document data fetching approach - React Query, SWR, GraphQL, etc.]

### Data Fetching Principles
1. **Loading states** - Always show loading UI
2. **Error handling** - Display meaningful error messages
3. **Caching** - Minimize redundant requests
4. **Optimistic updates** - Update UI immediately, rollback on error

## Chrome DevTools Integration

For agent validation, the UI can be:
- Launched per git worktree
- Driven via Chrome DevTools Protocol
- Validated via DOM snapshots and screenshots

Ensure all critical user journeys are testable via automation.

## Performance Budgets

- **Initial Load:** < 3s on 3G
- **Time to Interactive:** < 5s
- **Lighthouse Score:** > 90

## Accessibility Requirements

- **WCAG 2.1 Level AA** compliance
- **Keyboard navigation** for all interactive elements
- **Screen reader** friendly

---

*Update this document as frontend patterns evolve.*
"""


_PLANS = """\
# Planning Guidelines

**How to create and manage execution plans.**

## When to Create a Plan

Create an execution plan when:
1. Work will span multiple PRs
2. Work involves multiple domains or systems
3. Implementation approach needs alignment
4. Work will take > 1 day
5. Work has significant architectural impact

## Plan Types

### Lightweight Plans (< 1 day work)
- Documented in PR description
- No separate plan document needed
- Focus on "what" and "why"

### Execution Plans (> 1 day work)
- Full plan document in `docs/exec-plans/active/`
- Detailed implementation steps
- Decision log
- Progress tracking

## Execution Plan Template

See [docs/exec-plans/template.md](./docs/exec-plans/template.md)

## Plan Lifecycle

1. **Draft** - Initial plan created
2. **In Review** - Plan being reviewed by humans/agents
3. **Approved** - Plan approved, ready to execute
4. **In Progress** - Work is happening
5. **Completed** - Work done, plan moved to `completed/`

## Plan Structure

### 1. Context
- Why is this work needed?
- What problem does it solve?
- What is the current state?

### 2. Goals
- What are we trying to achieve?
- What are non-goals?
- How will we measure success?

### 3. Approach
- High-level implementation strategy
- Key technical decisions
- Tradeoffs considered

### 4. Implementation Steps
- Ordered list of tasks
- Dependencies between tasks
- Estimated complexity (S/M/L)

### 5. Validation
- How will we know it works?
- What tests need to be written?
- What edge cases to consider?

### 6. Risks
- What could go wrong?
- Mitigation strategies

### 7. Decision Log
- Track decisions made during implementation
- Rationale for changes to original plan

## Tech Debt Tracker

All known technical debt is tracked in [docs/exec-plans/tech-debt-tracker.md](./docs/exec-plans/tech-debt-tracker.md)

### Adding Tech Debt
When you identify tech debt:
1. Document it in the tracker
2. Prioritize (P0/P1/P2/P3)
3. Link to related code
4. Propose resolution approach

### Resolving Tech Debt
When fixing tech debt:
1. Update tracker status
2. Link to PR that resolved it
3. Document learnings

---

*Plans are living documents. Update them as you learn.*
"""


_PRODUCT_SENSE = """\
# Product Sense

**Product principles and user-facing guidelines.**

## Product Principles

1. **User value first** - Every feature must solve a real user problem
2. **Simple by default** - Hide complexity, expose power
3. **Fast and reliable** - Performance and reliability are features
4. **Accessible to all** - Build for everyone

## User Experience Guidelines

### Core User Flows
[Document your critical user journeys]

Example:
1. **New user onboarding**
   - What do first-time users see?
   - How do we guide them to value?

2. **Core workflow**
   - What is the main user action?
   - How do we make it effortless?

### UX Principles

1. **Immediate feedback** - User actions get instant response
2. **Forgiving** - Easy to undo, hard to break
3. **Consistent** - Same patterns throughout
4. **Predictable** - Users can anticipate behavior

## Feature Development

### Feature Spec Requirements

Every feature needs:
- [ ] User story (who, what, why)
- [ ] Success metrics
- [ ] Acceptance criteria
- [ ] Edge cases identified
- [ ] Failure modes considered

### Product Quality Bar

Before shipping:
- [ ] Works on happy path
- [ ] Handles errors gracefully
- [ ] Has loading states
- [ ] Has empty states
- [ ] Is accessible
- [ ] Is performant
- [ ] Is secure

## Metrics & Analytics

[Document what you measure and why]

### Key Metrics
- **Acquisition:** How users find the product
- **Activation:** How users get to first value
- **Retention:** How often users return
- **Revenue:** How the business makes money (if applicable)

## User Feedback Loop

1. **Collect** - Gather user feedback (support tickets, interviews, analytics)
2. **Synthesize** - Identify patterns and themes
3. **Prioritize** - Decide what to build based on impact
4. **Build** - Implement with quality
5. **Measure** - Track if it solved the problem

---

*Product sense guides what we build and why.*
"""


_QUALITY_SCORE = """\
# Quality Score

**Track quality metrics across domains and architectural layers.**

## Scoring System

Each domain and layer is graded on:
- **Test Coverage:** % of code covered by tests
- **Type Safety:** % of code that is type-checked
- **Documentation:** Are interfaces and behaviors documented?
- **Linting:** Are linting rules passing?
- **Performance:** Meet performance budgets?

### Grades

- **A** - Excellent (90-100%)
- **B** - Good (75-89%)
- **C** - Acceptable (60-74%)
- **D** - Needs Improvement (40-59%)
- **F** - Unacceptable (< 40%)

## Domain Quality

| Domain | Test Coverage | Type Safety | Documentation | Linting | Performance | Overall |
|--------|---------------|-------------|---------------|---------|-------------|---------|
| TBD    | -             | -           | -             | -       | -           | -       |

## Layer Quality

| Layer      | Test Coverage | Type Safety | Documentation | Linting | Overall |
|------------|---------------|-------------|---------------|---------|---------|
| Types      | -             | -           | -             | -       | -       |
| Config     | -             | -           | -             | -       | -       |
| Repository | -             | -           | -             | -       | -       |
| Service    | -             | -           | -             | -       | -       |
| Runtime    | -             | -           | -             | -       | -       |
| UI         | -             | -           | -             | -       | -       |

## Quality Targets

### Minimum Acceptable (Launch)
- Test Coverage: 70%
- Type Safety: 80%
- Documentation: 60%
- Linting: 100%
- Performance: Meets budgets

### Production Ready
- Test Coverage: 85%
- Type Safety: 95%
- Documentation: 80%
- Linting: 100%
- Performance: Exceeds budgets

## Known Quality Gaps

[Track areas that need improvement]

| Gap | Severity | Tracked In | Target Date |
|-----|----------|------------|-------------|
| TBD | P1       | Issue #X   | 2026-XX-XX  |

## Quality Improvement Process

1. **Automated Scanning** - CI runs quality checks on every PR
2. **Quality Reports** - Weekly quality score updates
3. **Improvement Plans** - Create execution plans for quality gaps
4. **Continuous Monitoring** - Track quality trends over time

---

*Quality scores are updated automatically by CI. Manual updates indicate automation gaps.*
"""


_RELIABILITY = """\
# Reliability Standards

**Guidelines for building reliable, production-ready systems.**

## Reliability Principles

1. **Fail gracefully** - Degrade functionality, never crash
2. **Observable** - Emit logs, metrics, and traces for all critical paths
3. **Recoverable** - Automatic retry with backoff
4. **Tested** - Integration tests against real infrastructure

## Error Handling

### Error Categories

1. **Expected errors** - User input validation, not found, etc.
   - Return typed error objects
   - Log at INFO level
   - Show user-friendly messages

2. **Unexpected errors** - System failures, network issues, etc.
   - Log at ERROR level with full context
   - Alert on-call if production
   - Retry with exponential backoff

### Error Response Format

All errors should include:
- `code` - Machine-readable error code
- `message` - Human-readable message
- `details` - Additional context (safe for logging)
- `requestId` - Trace ID for debugging

## Observability

### Logging

Use structured logging:
```javascript
logger.info({
  event: 'user_login',
  userId: '123',
  duration: 45,
  success: true
});
```

**Log Levels:**
- **DEBUG** - Detailed debugging (not in production)
- **INFO** - Normal operations
- **WARN** - Potential issues (rate limits, retries)
- **ERROR** - Failures requiring attention

### Metrics

Track:
- **Request latency** (p50, p95, p99)
- **Error rate** (% of failed requests)
- **Throughput** (requests per second)
- **Resource usage** (CPU, memory, database connections)

### Tracing

- Generate trace ID for every request
- Propagate trace ID across services
- Emit spans for all significant operations

## Performance Requirements

### Latency Budgets

| Operation | p50 | p95 | p99 |
|-----------|-----|-----|-----|
| API requests | < 100ms | < 300ms | < 1s |
| Database queries | < 50ms | < 150ms | < 500ms |
| Background jobs | < 5s | < 30s | < 2m |

### Resource Limits

- **Memory** - Monitor heap usage, set max heap size
- **CPU** - Alert on sustained > 70% usage
- **Connections** - Pool and limit database/external connections

## Retry & Circuit Breaker

### Retry Strategy
- Exponential backoff: 100ms, 200ms, 400ms, 800ms
- Max retries: 3
- Jitter: ±25% to prevent thundering herd

### Circuit Breaker
- **Closed** (normal): Requests flow through
- **Open** (failing): Fast-fail without attempting request
- **Half-open** (recovering): Allow limited requests to test recovery

## Deployment Safety

1. **Gradual rollout** - Deploy to small % of traffic first
2. **Health checks** - Automated health endpoint
3. **Rollback plan** - One-click rollback if needed
4. **Database migrations** - Backward-compatible, run before code deploy

## Incident Response

When production issues occur:
1. **Mitigate** - Stop the bleeding (rollback, scale up, etc.)
2. **Investigate** - Use logs, metrics, traces to find root cause
3. **Resolve** - Fix the underlying issue
4. **Document** - Write postmortem (what, why, how to prevent)
5. **Follow-up** - Implement prevention tasks

---

*Reliability is not optional. These standards apply to all production code.*
"""


_SECURITY = """\
# Security Guidelines

**Security principles and practices for this codebase.**

## Security Posture

1. **Zero trust** - Never trust user input
2. **Least privilege** - Minimal access rights
3. **Defense in depth** - Multiple security layers
4. **Secure by default** - Safe defaults, opt-in to dangerous operations

## Input Validation

### Validation Rules

1. **Validate all inputs** - User data, API requests, file uploads, etc.
2. **Whitelist over blacklist** - Define what's allowed, reject everything else
3. **Parse at boundaries** - Validate external data at system entry points
4. **Type safety** - Use schema validation (Zod, Yup, etc.)

### Common Vulnerabilities to Prevent

- **SQL Injection** - Use parameterized queries, never string interpolation
- **XSS** - Escape all user content, use CSP headers
- **CSRF** - Use CSRF tokens for state-changing operations
- **Command Injection** - Never pass user input to shell commands
- **Path Traversal** - Validate file paths, use allowlist for file access

## Authentication & Authorization

### Authentication
- **Password storage** - bcrypt/argon2 with salt
- **Session management** - Secure, httpOnly cookies
- **Token expiry** - Short-lived access tokens, refresh tokens

### Authorization
- **Role-based access control (RBAC)** - Define roles and permissions
- **Principle of least privilege** - Users/services get minimum necessary access
- **Authorization checks** - Verify permissions on every request

## Secrets Management

### Rules
1. **Never commit secrets** - No API keys, passwords, tokens in code
2. **Use environment variables** - Load secrets from env at runtime
3. **Rotate secrets** - Regular rotation schedule
4. **Limit secret scope** - Separate secrets per environment

### .env Files
- `.env` - Never commit (add to .gitignore)
- `.env.example` - Template without real values (safe to commit)

## Data Protection

### Data Classification
- **Public** - Anyone can see
- **Internal** - Employees only
- **Confidential** - Need-to-know basis
- **Restricted** - Legal/compliance requirements

### Encryption
- **In transit** - TLS 1.3 for all network traffic
- **At rest** - Encrypt sensitive data in database

## API Security

1. **Rate limiting** - Prevent abuse (e.g., 100 req/min per IP)
2. **Input validation** - Validate request bodies, query params, headers
3. **Output encoding** - Prevent XSS in API responses
4. **CORS** - Restrict allowed origins

## Dependency Security

1. **Audit dependencies** - Run `npm audit` / `bun audit` regularly
2. **Update regularly** - Keep dependencies up to date
3. **Minimal dependencies** - Fewer dependencies = smaller attack surface
4. **Verify integrity** - Use lock files, verify package signatures

## Security Testing

1. **Static analysis** - Linters catch common vulnerabilities
2. **Dependency scanning** - Automated vulnerability scanning in CI
3. **Manual review** - Security-critical code gets human review
4. **Penetration testing** - Regular security audits

## Security Incident Response

If you discover a security vulnerability:
1. **Do not publish** - Keep it private
2. **Assess impact** - How severe is it?
3. **Fix immediately** - Security bugs are P0
4. **Notify users** - If user data was exposed
5. **Postmortem** - How did it happen? How to prevent?

## Security Checklist

Before deploying:
- [ ] All inputs validated
- [ ] No secrets in code
- [ ] Authentication/authorization implemented
- [ ] HTTPS enforced
- [ ] Security headers set (CSP, HSTS, etc.)
- [ ] Rate limiting enabled
- [ ] Dependencies audited
- [ ] Error messages don't leak sensitive info

---

*Security is everyone's responsibility. When in doubt, ask for a security review.*
"""


# ---------------------------------------------------------------------------
# Public template functions
# ---------------------------------------------------------------------------


def agents_template(project_type: ProjectType) -> str:
    """Render the agent guide.  CLAUDE.md is written from the same string."""
    return render_string(_AGENTS, has_frontend=has_frontend(project_type))


def architecture_template(project_type: ProjectType) -> str:
    return render_string(
        _ARCHITECTURE,
        has_frontend=has_frontend(project_type),
        has_backend=has_backend(project_type),
    )


def design_template() -> str:
    return _DESIGN


def frontend_template() -> str:
    return _FRONTEND


def plans_template() -> str:
    return _PLANS


def product_sense_template() -> str:
    return _PRODUCT_SENSE


def quality_score_template() -> str:
    return _QUALITY_SCORE


def reliability_template() -> str:
    return _RELIABILITY


def security_template() -> str:
    return _SECURITY
