from pathlib import Path
from typing import Any, Callable, Dict, List, Optional
from jinja2 import Environment, FileSystemLoader, StrictUndefined

TEMPLATES_ROOT = Path(__file__).resolve().parents[1] / "templates"


class TemplateRenderer:
    def __init__(self, templates_root: Path = TEMPLATES_ROOT) -> None:
        self.templates_root = Path(templates_root)
        self.env = Environment(
            loader=FileSystemLoader(str(self.templates_root)),
            undefined=StrictUndefined,
            keep_trailing_newline=True,
            trim_blocks=True,
            lstrip_blocks=True,
            autoescape=False,
        )

    def templates(self) -> List[str]:
        return sorted(p.name for p in self.templates_root.iterdir() if p.is_dir())

    def scaffold(
        self,
        template_name: str,
        out_dir: Path,
        context: Dict[str, Any],
        notify: Optional[Callable[[Path], None]] = None,
    ) -> List[Path]:
        src_root = self.templates_root / template_name
        out_dir = Path(out_dir)
        written: List[Path] = []

        if not src_root.is_dir():
            raise FileNotFoundError(f"Template '{template_name}' not found at {src_root}")

        # Sorted so files are always written in the same order
        for src_path in sorted(src_root.rglob("*")):
            rel = src_path.relative_to(src_root)

            # Render path parts so folder/file names can use Jinja vars
            rendered_parts = []
            for part in rel.parts:
                rendered_parts.append(self.env.from_string(part).render(**context))
            rendered_rel = Path(*rendered_parts)

            # Strip .j2 from output filename
            if rendered_rel.suffix == ".j2":
                rendered_rel = rendered_rel.with_suffix("")
            dst_path = out_dir / rendered_rel

            if src_path.is_dir():
                if notify:
                    notify(rendered_rel)
                dst_path.mkdir(parents=True, exist_ok=True)
                continue

            # Render file contents
            template = self.env.get_template((Path(template_name) / rel).as_posix())
            dst_path.parent.mkdir(parents=True, exist_ok=True)
            if notify:
                notify(rendered_rel)
            dst_path.write_text(template.render(**context), encoding="utf-8")
            written.append(dst_path)

        return written
