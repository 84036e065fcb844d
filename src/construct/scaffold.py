"""Ordered creation of the project tree from the packaged stubs."""

from __future__ import annotations

import logging
import shutil
from dataclasses import dataclass
from pathlib import Path

from .config import PLACEHOLDERS, NameSet
from .errors import ScaffoldError
from .template import StubRenderer

__all__ = ["SCAFFOLD_STEPS", "STUBS_DIR", "ScaffoldEngine", "ScaffoldStep", "StubTemplate"]


LOGGER = logging.getLogger(__name__)

STUBS_DIR = Path(__file__).resolve().parent / "stubs"


@dataclass(frozen=True, slots=True)
class StubTemplate:
    """A stub document and the placeholders it supports.

    Stubs without placeholders are copied byte for byte.
    """

    source: str
    placeholders: tuple[str, ...] = ()


@dataclass(frozen=True, slots=True)
class ScaffoldStep:
    """One emission step. A step without a stub creates a directory."""

    name: str
    destination: str
    stub: StubTemplate | None = None


SCAFFOLD_STEPS: tuple[ScaffoldStep, ...] = (
    ScaffoldStep("root", "{project_lower}"),
    ScaffoldStep("src", "{project_lower}/src"),
    ScaffoldStep("gitignore", "{project_lower}/.gitignore", StubTemplate("gitignore.txt")),
    ScaffoldStep(
        "readme",
        "{project_lower}/README.md",
        StubTemplate("README.txt", ("project_upper",)),
    ),
    ScaffoldStep(
        "phpunit",
        "{project_lower}/phpunit.xml",
        StubTemplate("phpunit.txt", ("project_upper",)),
    ),
    ScaffoldStep("travis", "{project_lower}/.travis.yml", StubTemplate("travis.txt")),
    ScaffoldStep(
        "composer",
        "{project_lower}/composer.json",
        StubTemplate("composer.txt", PLACEHOLDERS),
    ),
    ScaffoldStep(
        "class",
        "{project_lower}/src/{project_upper}.php",
        StubTemplate("Project.txt", ("project_upper", "vendor_upper")),
    ),
    ScaffoldStep("tests", "{project_lower}/tests"),
    ScaffoldStep(
        "test-class",
        "{project_lower}/tests/{project_upper}Test.php",
        StubTemplate("ProjectTest.txt", ("project_upper", "project_lower", "vendor_upper")),
    ),
)


class ScaffoldEngine:
    """Run :data:`SCAFFOLD_STEPS` for a :class:`NameSet`.

    The first failing step aborts the run with :class:`ScaffoldError`. Files and
    directories created by earlier steps are left in place.
    """

    def __init__(
        self,
        base_dir: str | Path | None = None,
        *,
        stubs_dir: str | Path | None = None,
        renderer: StubRenderer | None = None,
    ) -> None:
        self.base_dir = Path.cwd() if base_dir is None else Path(base_dir)
        self.stubs_dir = STUBS_DIR if stubs_dir is None else Path(stubs_dir)
        self.renderer = renderer or StubRenderer()

    def scaffold(self, names: NameSet) -> Path:
        """Create the project described by ``names`` and return its root directory."""

        context = names.context()
        for number, step in enumerate(SCAFFOLD_STEPS, start=1):
            destination = self.base_dir / self.renderer.render_string(step.destination, context)
            LOGGER.debug("step %d (%s): %s", number, step.name, destination)
            try:
                self._run_step(step, destination, context)
            except (OSError, UnicodeError) as exc:
                LOGGER.error("step %d (%s) failed: %s", number, step.name, exc)
                raise ScaffoldError(number, step.name, exc) from exc

        return self.base_dir / names.project_lower

    def _run_step(self, step: ScaffoldStep, destination: Path, context: dict[str, str]) -> None:
        if step.stub is None:
            destination.mkdir()
            return

        source = self.stubs_dir / step.stub.source
        if not step.stub.placeholders:
            shutil.copyfile(source, destination)
            return

        self.renderer.render_file(
            source,
            context,
            tokens=step.stub.placeholders,
            target=destination,
        )
