"""agentic-engine -- scaffold and validate agent-first project structures."""

__version__ = "0.1.0"
