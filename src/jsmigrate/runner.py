# jsmigrate/runner.py
# AI-Mind (c) 2025 by Martin Bukowski is licensed under CC BY-NC-SA 4.0
"""
Applying recipes to files on disk.

Discovers source files, runs one codemod per file, writes changed files (or
renders a diff in dry-run mode), and runs fixture directories of
input/expected pairs.
"""

from dataclasses import dataclass, field
import difflib
import logging
import os
from pathlib import Path
from typing import Iterable, Iterator, Optional

from .config import RunConfig
from .exceptions import ParseError
from .recipes.base import Codemod
from .syntax import SgRoot, language_for_path

logger = logging.getLogger(__name__)


@dataclass
class FileResult:
    """Outcome of running a codemod on one file."""

    path: Path
    changed: bool = False
    error: Optional[str] = None
    diff: Optional[str] = None


@dataclass
class RunSummary:
    """Outcome of a run over many files."""

    results: list[FileResult] = field(default_factory=list)

    @property
    def changed(self) -> list[FileResult]:
        return [r for r in self.results if r.changed]

    @property
    def failed(self) -> list[FileResult]:
        return [r for r in self.results if r.error is not None]

    @property
    def ok(self) -> bool:
        return not self.failed

    def __str__(self) -> str:
        return (
            f"{len(self.results)} files, {len(self.changed)} changed, "
            f"{len(self.failed)} failed"
        )


def discover_files(
    paths: Iterable[Path],
    extensions: Iterable[str],
    exclude_dirs: Iterable[str] = (),
) -> Iterator[Path]:
    """Yield source files under `paths` in sorted order.

    Explicit file arguments are yielded when their suffix matches; directories
    are walked recursively, skipping any directory named in `exclude_dirs`.
    """
    suffixes = {e.lower() for e in extensions}
    excluded = set(exclude_dirs)

    for path in paths:
        if path.is_file():
            if path.suffix.lower() in suffixes:
                yield path
            continue
        if not path.is_dir():
            logger.warning(f"Path not found: {path}")
            continue

        for dirpath, dirnames, filenames in os.walk(path):
            dirnames[:] = sorted(d for d in dirnames if d not in excluded)
            for filename in sorted(filenames):
                if Path(filename).suffix.lower() in suffixes:
                    yield Path(dirpath) / filename


def render_diff(path: Path, old: str, new: str) -> str:
    diff = difflib.unified_diff(
        old.splitlines(keepends=True),
        new.splitlines(keepends=True),
        fromfile=f"a/{path}",
        tofile=f"b/{path}",
    )
    return "".join(diff)


def transform_text(codemod: Codemod, source: str, path: Path) -> Optional[str]:
    """Parse `source` with the grammar for `path` and transform it.

    Raises:
        ParseError: If the file type is unsupported or the source is invalid.
    """
    language = language_for_path(path)
    if language is None:
        raise ParseError(f"Unsupported file type: {path.suffix}")
    return codemod.transform(SgRoot(source, language, filename=str(path)))


def transform_file(codemod: Codemod, path: Path, dry_run: bool = False) -> FileResult:
    """Run `codemod` on one file, writing it back unless `dry_run`."""
    result = FileResult(path)

    try:
        source = path.read_text(encoding="utf-8")
        new_source = transform_text(codemod, source, path)
    except (ParseError, UnicodeDecodeError, OSError) as e:
        logger.error(f"Skipping {path}: {e}")
        result.error = str(e)
        return result

    if new_source is None or new_source == source:
        logger.debug(f"No changes: {path}")
        return result

    result.changed = True
    if dry_run:
        result.diff = render_diff(path, source, new_source)
    else:
        path.write_text(new_source, encoding="utf-8")
        logger.info(f"Updated {path}")
    return result


def run_recipe(
    codemod: Codemod,
    paths: Iterable[Path],
    config: Optional[RunConfig] = None,
    dry_run: bool = False,
) -> RunSummary:
    """Apply `codemod` to every discovered file. Files are independent."""
    config = config or RunConfig()
    summary = RunSummary()
    for path in discover_files(paths, config.extensions, config.exclude_dirs):
        summary.results.append(transform_file(codemod, path, dry_run=dry_run))
    logger.info(f"{codemod.name}: {summary}")
    return summary


@dataclass
class FixtureResult:
    """Outcome of one fixture case."""

    name: str
    passed: bool
    expected: str
    actual: str
    error: Optional[str] = None

    def diff(self) -> str:
        return render_diff(Path(self.name), self.expected, self.actual)


def normalize(text: str) -> str:
    """Fixture comparison ignores trailing whitespace at end of file."""
    return text.rstrip() + "\n"


def _find_case_file(case_dir: Path, stem: str) -> Optional[Path]:
    for candidate in sorted(case_dir.glob(f"{stem}.*")):
        if language_for_path(candidate) is not None:
            return candidate
    return None


def run_fixtures(codemod: Codemod, fixtures_dir: Path) -> list[FixtureResult]:
    """Run every case directory under `fixtures_dir`.

    A case holds `input.<ext>` and optionally `expected.<ext>`. Without an
    expected file the codemod must leave the input unchanged.
    """
    results = []
    for case_dir in sorted(p for p in fixtures_dir.iterdir() if p.is_dir()):
        input_path = _find_case_file(case_dir, "input")
        if input_path is None:
            logger.warning(f"No input file in {case_dir}")
            continue

        source = input_path.read_text(encoding="utf-8")
        expected_path = _find_case_file(case_dir, "expected")
        expected = (
            expected_path.read_text(encoding="utf-8") if expected_path else source
        )

        try:
            output = transform_text(codemod, source, input_path)
        except ParseError as e:
            logger.error(f"Fixture {case_dir.name} failed to parse: {e}")
            results.append(
                FixtureResult(case_dir.name, False, expected, source, error=str(e))
            )
            continue

        actual = source if output is None else output
        results.append(
            FixtureResult(
                name=case_dir.name,
                passed=normalize(actual) == normalize(expected),
                expected=expected,
                actual=actual,
            )
        )
    return results
