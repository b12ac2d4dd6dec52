"""Render a new day's solution skeleton from the Jinja2 template."""

from __future__ import annotations

from pathlib import Path

from jinja2 import Environment, FileSystemLoader, StrictUndefined

from aocinput.config import day_stem

SHAPES = ("lines", "numbers", "blocks", "header")


class ScaffoldRenderer:
    """Render ``dayNN.py`` modules that read their input through InputSource."""

    def __init__(self, template_path: Path | None = None, year: int = 2021) -> None:
        if template_path is None:
            template_path = Path(__file__).resolve().parent.parent / "template" / "day.py.j2"

        loader = FileSystemLoader(str(template_path.parent))
        self._env = Environment(
            loader=loader,
            autoescape=False,
            trim_blocks=True,
            lstrip_blocks=True,
            keep_trailing_newline=True,
            undefined=StrictUndefined,
        )
        self._template_name = template_path.name
        self.year = year

    def render(self, day: int, *, shape: str = "lines") -> str:
        if shape not in SHAPES:
            raise ValueError(f"Unknown input shape {shape!r}, expected one of {', '.join(SHAPES)}")
        # Validates the day range before anything is rendered.
        day_stem(day)

        template = self._env.get_template(self._template_name)
        return template.render(day=day, year=self.year, shape=shape)

    def write(self, day: int, solutions_dir: Path, *, shape: str = "lines", force: bool = False) -> Path:
        target = Path(solutions_dir) / f"{day_stem(day)}.py"
        if target.exists() and not force:
            raise FileExistsError(f"{target} already exists")

        source = self.render(day, shape=shape)
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_text(source, encoding="utf-8")
        return target
