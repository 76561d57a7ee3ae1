"""Mermaid flowchart rendering of the task graph."""

from __future__ import annotations

import io
from collections.abc import Iterable
from typing import TextIO

from dagtrack.models import Dependency, Task


def write_mermaid(
    tasks: Iterable[Task], dependencies: Iterable[Dependency], output: TextIO
) -> None:
    """Write a Mermaid flowchart of the tasks and their edges to ``output``.

    Edges point from a prerequisite to the task that depends on it.
    """
    output.write("flowchart TD\n")
    for task in tasks:
        title = task.title.replace('"', '\\"')
        output.write(
            f'    t{task.id}["{task.status.display_char()} #{task.id}{title}"]\n'
        )
    for dep in dependencies:
        output.write(f"    t{dep.depends_on} --> t{dep.task_id}\n")


def render_mermaid(tasks: Iterable[Task], dependencies: Iterable[Dependency]) -> str:
    """Return the Mermaid flowchart as a string."""
    buffer = io.StringIO()
    write_mermaid(tasks, dependencies, buffer)
    return buffer.getvalue()