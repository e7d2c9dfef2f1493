"""Templates for the ``docs/`` knowledge base.

Index pages, the core-beliefs document, and the starter templates for design
docs, execution plans, product specs and the tech-debt tracker.  None of these
depend on the project options.
"""

from __future__ import annotations


_DESIGN_DOCS_INDEX = """\
# Design Documentation

This directory contains all design documents and architectural decisions.

## Active Designs

- [Core Beliefs](./core-beliefs.md)

## Template

Use `template.md` as a starting point for new design documents.
"""


_PRODUCT_SPECS_INDEX = """\
# Product Specifications

This directory contains all product specifications and feature requirements.

## Active Specs

- None yet

## Template

Use `template.md` as a starting point for new product specs.
"""


_CORE_BELIEFS = """\
# Core Beliefs

**Fundamental principles for agent-first development in this repository.**

Last Updated: YYYY-MM-DD

## Agent-First Operating Principles

### 1. Repository is the Source of Truth
**Belief:** If it's not in the repository, it doesn't exist to agents.

**Implications:**
- All knowledge must be versioned in the repository
- Slack discussions must be captured in design docs
- External docs must be extracted to `docs/references/`
- Decisions must be documented, not just discussed

### 2. Progressive Disclosure
**Belief:** Give agents a map, not an encyclopedia.

**Implications:**
- AGENTS.md is a table of contents (~100 lines)
- Detailed docs live in `docs/` directory
- Links provide navigation, not inline walls of text
- Context grows as needed, not all up-front

### 3. Enforce Mechanically
**Belief:** Linters and tests are better than manual review.

**Implications:**
- Architectural constraints are enforced by custom linters
- Documentation freshness is validated in CI
- Code quality is measured automatically
- Humans review judgment calls, not mechanical issues

### 4. Agent Legibility First
**Belief:** Optimize for agent reasoning, not just human aesthetics.

**Implications:**
- Structure and patterns matter more than style
- Consistency enables pattern recognition
- Explicit is better than implicit
- Documentation explains "why," not "what"

### 5. Continuous Cleanup
**Belief:** Technical debt is like interest—pay it down continuously.

**Implications:**
- Automated cleanup runs regularly
- Bad patterns are fixed as soon as spotted
- Quality scores track drift over time
- "Friday cleanup" is automated, not manual

### 6. Real Environments Over Mocks
**Belief:** Tests should validate real behavior, not mocked behavior.

**Implications:**
- Use Docker for databases, Redis, external services
- Integration tests over unit tests
- Validate actual contracts, not assumptions
- Local dev mirrors production

### 7. Boring Technology Wins
**Belief:** Predictable, well-documented tools are better than exciting new ones.

**Implications:**
- Prefer standard libraries over cutting-edge frameworks
- Choose technologies agents can reason about
- Stability and composability over novelty
- Internalize when external is too opaque

### 8. Strict Boundaries, Flexible Internals
**Belief:** Enforce constraints at boundaries, allow autonomy within them.

**Implications:**
- Layered architecture is non-negotiable
- Within layers, implementation details are flexible
- Cross-cutting concerns go through explicit interfaces
- Dependency directions are enforced, not suggested

### 9. Feedback Loops are Multipliers
**Belief:** Fast, automated feedback enables speed without chaos.

**Implications:**
- CI validates every PR
- Agents can test their own changes
- Chrome DevTools lets agents drive the UI
- Observability stack makes behavior visible

### 10. Documentation is Code
**Belief:** Docs are not second-class citizens—they are part of the system.

**Implications:**
- Docs are versioned with code
- Stale docs break CI
- Documentation gaps are treated as bugs
- Design docs are reviewed like code

## Anti-Patterns to Avoid

### ❌ The "One Big AGENTS.md"
- **Problem:** Crowds out context, impossible to maintain
- **Solution:** AGENTS.md as table of contents, detailed docs in `docs/`

### ❌ Relying on External Knowledge
- **Problem:** Agents can't access Slack, Google Docs, or tribal knowledge
- **Solution:** Everything must be in-repo and discoverable

### ❌ Mocking Everything
- **Problem:** Tests pass but real code breaks
- **Solution:** Use Docker for real infrastructure in tests

### ❌ Manual Quality Gates
- **Problem:** Doesn't scale, blocks throughput
- **Solution:** Automate checks, make failures obvious

### ❌ Letting Debt Compound
- **Problem:** Becomes overwhelming, requires painful cleanup
- **Solution:** Continuous automated cleanup, fix patterns early

## Evolution of Beliefs

These beliefs are living principles. As we learn what works and what doesn't, we update them.

### Change Log

| Date | Change | Rationale |
|------|--------|-----------|
| YYYY-MM-DD | Initial beliefs documented | Establish foundation |

---

*These beliefs guide all architectural and process decisions. Challenge them when they don't serve us.*
"""


_DESIGN_DOC = """\
# [Feature/Component Name]

**Status:** [Draft | In Review | Approved | Implemented | Deprecated]
**Author:** [Agent/Human]
**Created:** YYYY-MM-DD
**Last Updated:** YYYY-MM-DD

## Overview

Brief 2-3 sentence summary of what this design document covers.

## Context & Motivation

### Problem Statement
What problem are we solving? Why does it need to be solved?

### Current State
What exists today? What are the pain points?

### Goals
- What are we trying to achieve?
- What does success look like?

### Non-Goals
- What are we explicitly not solving?
- What's out of scope?

## Proposed Design

### High-Level Approach
Describe the solution at a conceptual level.

### Detailed Design

#### Component/Module Structure
```
[Diagram or code structure]
```

#### Data Models
```typescript
// Type definitions, schemas, etc.
```

#### API/Interface
```typescript
// Public interfaces
```

#### Implementation Details
Key technical decisions and how things work internally.

## Alternatives Considered

### Alternative 1: [Name]
**Pros:**
- ...

**Cons:**
- ...

**Why not chosen:** ...

### Alternative 2: [Name]
**Pros:**
- ...

**Cons:**
- ...

**Why not chosen:** ...

## Tradeoffs & Decisions

| Decision | Rationale | Tradeoffs |
|----------|-----------|-----------|
| Example  | Why       | What we gain vs lose |

## Implementation Plan

1. **Phase 1:** ...
2. **Phase 2:** ...
3. **Phase 3:** ...

## Testing Strategy

- **Unit tests:** What will be unit tested?
- **Integration tests:** What will be integration tested?
- **Edge cases:** What edge cases need coverage?

## Security Considerations

- What security implications does this have?
- What mitigations are in place?

## Performance Implications

- What is the performance impact?
- Are there any bottlenecks?
- What monitoring is needed?

## Rollout Plan

- How will this be deployed?
- Is there a gradual rollout strategy?
- What metrics will we track?

## Open Questions

- [ ] Question 1?
- [ ] Question 2?

## References

- [Related design doc](./other-doc.md)
- [External reference](https://example.com)

---

*Update this document as the design evolves during implementation.*
"""


_EXEC_PLAN = """\
# [Feature/Task Name]

**Status:** [Draft | In Review | Approved | In Progress | Completed]
**Owner:** [Agent/Human]
**Created:** YYYY-MM-DD
**Target Completion:** YYYY-MM-DD
**Actual Completion:** YYYY-MM-DD (if completed)

## Context

### What are we building?
Brief description of the feature/task.

### Why are we building it?
User need, business value, or technical requirement.

### Success Criteria
- [ ] Criterion 1
- [ ] Criterion 2
- [ ] Criterion 3

## Approach

### High-Level Strategy
How will we approach this work?

### Key Decisions
| Decision | Rationale | Alternatives Considered |
|----------|-----------|-------------------------|
| Example  | Why       | What else we could do   |

### Dependencies
- **Blocks:** What this work depends on
- **Blocked by:** What depends on this work

## Implementation Tasks

### Phase 1: [Phase Name]
- [ ] Task 1 (Complexity: S/M/L)
- [ ] Task 2 (Complexity: S/M/L)
- [ ] Task 3 (Complexity: S/M/L)

### Phase 2: [Phase Name]
- [ ] Task 1 (Complexity: S/M/L)
- [ ] Task 2 (Complexity: S/M/L)

### Phase 3: [Phase Name]
- [ ] Task 1 (Complexity: S/M/L)

**Complexity Legend:**
- S (Small): < 2 hours
- M (Medium): 2-8 hours
- L (Large): > 8 hours

## Validation Plan

### Testing
- What tests will be written?
- How will we validate correctness?

### Quality Checks
- [ ] Tests pass
- [ ] Linters pass
- [ ] Documentation updated
- [ ] Performance benchmarks met

### Acceptance Criteria
- [ ] Feature works on happy path
- [ ] Error cases handled
- [ ] Edge cases covered
- [ ] Performance meets requirements

## Risks & Mitigations

| Risk | Likelihood | Impact | Mitigation |
|------|------------|--------|------------|
| Example risk | Medium | High | How we'll handle it |

## Progress Log

### YYYY-MM-DD
- Started Phase 1
- Completed Task 1
- Discovered issue with X, created tech debt entry

### YYYY-MM-DD
- Completed Phase 1
- Started Phase 2

## Decision Log

### YYYY-MM-DD: [Decision Title]
**Context:** What prompted this decision
**Decision:** What we decided
**Rationale:** Why we made this choice
**Impact:** How this affects the plan

## Learnings

### What Went Well
- ...

### What Could Be Improved
- ...

### What We Learned
- ...

---

*Move to `docs/exec-plans/completed/` when finished.*
"""


_TECH_DEBT_TRACKER = """\
# Technical Debt Tracker

**Last Updated:** YYYY-MM-DD

## Active Technical Debt

### P0 - Critical (Must Fix)
| Item | Description | Impact | Created | Owner | Tracked In |
|------|-------------|--------|---------|-------|------------|
| TBD  | Description | High   | Date    | Agent/Human | Issue/PR |

### P1 - High Priority (Fix Soon)
| Item | Description | Impact | Created | Owner | Tracked In |
|------|-------------|--------|---------|-------|------------|
| TBD  | Description | Medium | Date    | Agent/Human | Issue/PR |

### P2 - Medium Priority (Plan to Fix)
| Item | Description | Impact | Created | Owner | Tracked In |
|------|-------------|--------|---------|-------|------------|
| TBD  | Description | Low-Medium | Date | Agent/Human | Issue/PR |

### P3 - Low Priority (Nice to Have)
| Item | Description | Impact | Created | Owner | Tracked In |
|------|-------------|--------|---------|-------|------------|
| TBD  | Description | Low    | Date    | Agent/Human | Issue/PR |

## Debt Categories

### Code Quality
- Duplicated code that should be abstracted
- Complex functions that need refactoring
- Missing error handling
- Inconsistent patterns

### Testing
- Missing test coverage
- Flaky tests
- Test infrastructure improvements

### Documentation
- Outdated documentation
- Missing API documentation
- Unclear code comments

### Performance
- Known performance bottlenecks
- Missing performance monitoring
- Unoptimized queries

### Security
- Known security vulnerabilities
- Missing security controls
- Outdated dependencies

### Infrastructure
- Configuration management issues
- Missing monitoring/alerting
- Deployment process improvements

## Resolved Debt (Recent)

| Item | Description | Resolved Date | PR | Learnings |
|------|-------------|---------------|-------|-----------|
| TBD  | What was fixed | YYYY-MM-DD | #123 | What we learned |

## Debt Prevention

### Golden Principles
1. **No duplicate code** - Extract to shared utilities
2. **Parse at boundaries** - Validate all external data
3. **Consistent error handling** - Use standard error patterns
4. **Automated cleanup** - Run cleanup agents weekly

### Automated Checks
- Linters catch common issues
- CI validates documentation freshness
- Dependency audits run daily
- Quality scores tracked weekly

---

*This tracker is maintained by humans and agents. Update when you identify or resolve technical debt.*
"""


_PRODUCT_SPEC = """\
# [Feature Name]

**Status:** [Draft | In Review | Approved | In Development | Shipped]
**Owner:** [Product/Human]
**Created:** YYYY-MM-DD
**Target Ship:** YYYY-MM-DD

## Overview

One-paragraph summary of what this feature is and why it matters.

## Problem Statement

### User Pain Point
What problem do users have today?

### Evidence
How do we know this is a problem? (User feedback, data, support tickets, etc.)

### Impact
Who is affected? How many users?

## Goals

### User Goals
What does the user want to accomplish?

### Business Goals
What business metric does this move?

### Success Metrics
How will we measure success?
- Metric 1: Target value
- Metric 2: Target value

## User Stories

### Primary User Story
**As a** [type of user]
**I want** [goal]
**So that** [benefit]

### Additional User Stories
- **As a** ... **I want** ... **So that** ...
- **As a** ... **I want** ... **So that** ...

## User Experience

### User Flow
1. User does X
2. System responds with Y
3. User sees Z

### Mockups/Wireframes
[Link to designs or embed images]

### Edge Cases
- What happens if X?
- What if user does Y?

## Requirements

### Functional Requirements
- [ ] Requirement 1
- [ ] Requirement 2
- [ ] Requirement 3

### Non-Functional Requirements
- [ ] Performance: < Xms response time
- [ ] Accessibility: WCAG 2.1 AA compliant
- [ ] Security: [Specific security requirements]

### Out of Scope
- Explicitly not included in this version

## Technical Considerations

### Technical Constraints
Any technical limitations or requirements?

### Dependencies
What other systems/features does this depend on?

### Data Requirements
What data do we need to collect/store?

## Acceptance Criteria

- [ ] User can accomplish X
- [ ] Error case Y is handled gracefully
- [ ] Performance meets Z requirement
- [ ] Accessible via keyboard
- [ ] Works on mobile and desktop

## Launch Plan

### Phased Rollout
1. **Phase 1:** Internal testing
2. **Phase 2:** Beta users (X% of traffic)
3. **Phase 3:** General availability

### Monitoring
What metrics/logs will we track post-launch?

### Rollback Plan
How do we turn this off if needed?

## Open Questions

- [ ] Question 1?
- [ ] Question 2?

## References

- [Related product spec](./other-spec.md)
- [User research](link)
- [Design mockups](link)

---

*Update this spec as requirements evolve.*
"""


def design_docs_index_template() -> str:
    return _DESIGN_DOCS_INDEX


def core_beliefs_template() -> str:
    return _CORE_BELIEFS


def design_doc_template() -> str:
    return _DESIGN_DOC


def exec_plan_template() -> str:
    return _EXEC_PLAN


def tech_debt_tracker_template() -> str:
    return _TECH_DEBT_TRACKER


def product_specs_index_template() -> str:
    return _PRODUCT_SPECS_INDEX


def product_spec_template() -> str:
    return _PRODUCT_SPEC
