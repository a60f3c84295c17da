"""Directory preparation and the generation sequence for one project.

``generate`` is the whole run after argument parsing: check/create the target
directory, then render the base template set and, with ``sup``, the
supervision tree set on top of it. Nothing is rolled back if a write fails
halfway; the caller sees the ``OSError``.
"""

from __future__ import annotations

from pathlib import Path
from typing import Callable, List, Optional

from ..utils.shell import Confirm, yes
from .context import GenerationContext
from .renderer import TemplateRenderer

BASE_TEMPLATE = "erlang"
SUP_TEMPLATE = "erlang_sup"


class GeneratorError(Exception):
    pass


def prepare_directory(path: str, confirm: Confirm = yes) -> Path:
    target = Path(path).expanduser()
    if path == ".":
        return target

    if target.is_dir():
        msg = f'The directory "{path}" already exists. Are you sure you want to continue?'
        if not confirm(msg):
            raise GeneratorError("Please select another directory for installation")

    target.mkdir(parents=True, exist_ok=True)
    return target


def generate(
    context: GenerationContext,
    renderer: Optional[TemplateRenderer] = None,
    confirm: Confirm = yes,
    notify: Optional[Callable[[Path], None]] = None,
) -> List[Path]:
    renderer = renderer or TemplateRenderer()
    out_dir = prepare_directory(context.path, confirm)
    assigns = context.model_dump()
    announced = set()

    # Both template sets share src/, announce it once
    def announce(path: Path) -> None:
        if notify and path not in announced:
            announced.add(path)
            notify(path)

    written = renderer.scaffold(BASE_TEMPLATE, out_dir, assigns, announce)
    if context.sup:
        written += renderer.scaffold(SUP_TEMPLATE, out_dir, assigns, announce)
    return written
