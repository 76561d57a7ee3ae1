"""Task tracking over a dependency graph: models, ordering, state, focus, Mermaid output and MCP configuration."""

__version__ = "0.1.1"

__all__ = [
    "errors",
    "graph",
    "install",
    "mermaid",
    "models",
    "ordering",
    "paths",
    "state",
    "target",
]