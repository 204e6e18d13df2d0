"""Turn an ExtractionPlan into a file on disk."""

from __future__ import annotations

import logging
import re
import subprocess
from pathlib import Path

from react_extractor.config import Config
from react_extractor.generator.component import component_usage, render_component
from react_extractor.generator.hook import hook_usage, render_hook
from react_extractor.models import Category, GeneratedFile
from react_extractor.pipeline import ExtractionPlan

logger = logging.getLogger(__name__)

COMPONENT_NAME_RE = re.compile(r"^[A-Z][a-zA-Z0-9]*$")
HOOK_NAME_RE = re.compile(r"^use[A-Z][a-zA-Z0-9]*$")

FORMAT_COMMANDS: tuple[tuple[str, ...], ...] = (
    ("npx", "prettier", "--write"),
    ("npx", "eslint", "--fix"),
)
FORMAT_TIMEOUT_S = 60.0


class InvalidNameError(ValueError):
    """Name does not follow the component/hook naming convention."""


def validate_name(name: str, category: Category) -> None:
    if category == Category.COMPONENT and not COMPONENT_NAME_RE.match(name):
        msg = f"Component name must be in PascalCase (e.g., MyComponent): {name!r}"
        raise InvalidNameError(msg)
    if category == Category.HOOK and not HOOK_NAME_RE.match(name):
        msg = f"Hook name must start with 'use' followed by PascalCase (e.g., useCounter): {name!r}"
        raise InvalidNameError(msg)


def target_path(
    root: Path, name: str, category: Category, *, typed: bool, config: Config
) -> Path:
    """``components/Name.tsx`` / ``hooks/useName.ts`` (JS extensions when untyped)."""
    if category == Category.COMPONENT:
        return root / config.components_dir_name / f"{name}{'.tsx' if typed else '.jsx'}"
    return root / config.hooks_dir_name / f"{name}{'.ts' if typed else '.js'}"


def build_generated_file(
    plan: ExtractionPlan,
    name: str,
    root: Path,
    *,
    category: Category | None = None,
    config: Config | None = None,
) -> GeneratedFile:
    """Render the module text and usage string for a plan.

    Raises:
        InvalidNameError: name violates the convention for its category.
        ValueError: the category is unknown.
    """
    config = config or Config()
    category = category or plan.category
    if category == Category.UNKNOWN:
        msg = (
            "Unable to detect if selection contains a JSX component or hook logic. "
            "Choose the component or hook kind explicitly."
        )
        raise ValueError(msg)

    validate_name(name, category)

    if category == Category.COMPONENT:
        props = list(plan.props.props) if plan.props is not None else []
        content = render_component(
            name, plan.code, props, typed=plan.typed, indent=config.component_indent
        )
        usage = component_usage(name, props)
    else:
        returns = list(plan.hook_returns)
        content = render_hook(name, plan.code, returns, indent=config.hook_indent)
        usage = hook_usage(name, returns)

    path = target_path(root, name, category, typed=plan.typed, config=config)
    return GeneratedFile(
        name=name,
        category=category,
        path=str(path),
        content=content,
        usage=usage,
        typed=plan.typed,
    )


def write_generated(generated: GeneratedFile, *, overwrite: bool = False) -> Path:
    """Write the module, creating parent directories.

    Raises:
        FileExistsError: target exists and ``overwrite`` is False.
    """
    path = Path(generated.path)
    if path.exists() and not overwrite:
        raise FileExistsError(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(generated.content, encoding="utf-8")
    return path


def format_file(path: Path) -> bool:
    """Run prettier then eslint on ``path``. Failures are logged, never raised."""
    ok = True
    for command in FORMAT_COMMANDS:
        try:
            proc = subprocess.run(
                [*command, str(path)],
                capture_output=True,
                text=True,
                timeout=FORMAT_TIMEOUT_S,
                check=False,
            )
        except (OSError, subprocess.TimeoutExpired) as exc:
            logger.warning("%s failed for %s: %s", command[1], path, exc)
            ok = False
            continue
        if proc.returncode != 0:
            logger.warning(
                "%s exited %d for %s: %s", command[1], proc.returncode, path, proc.stderr.strip()
            )
            ok = False
    return ok
