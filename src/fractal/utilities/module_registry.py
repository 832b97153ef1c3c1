from __future__ import annotations

from importlib import import_module
from pathlib import Path
from typing import TypeVar

from fractal.utilities.logging import get_logger

T = TypeVar("T")

logger = get_logger(__name__)


def discover_registry(
    package_dir: Path,
    module_root: str,
    attribute: str = "build",
) -> dict[str, T]:
    """Map module stems under ``package_dir`` to their ``attribute``, skipping modules without one."""

    registry: dict[str, T] = {}
    for entry in sorted(package_dir.iterdir()):
        if not entry.is_file():
            continue
        if entry.suffix != ".py" or entry.name.startswith("_"):
            continue
        module_name = f"{module_root}.{entry.stem}"
        module = import_module(module_name)
        logger.debug("Imported program module %s", module_name)
        if hasattr(module, attribute):
            registry[entry.stem] = getattr(module, attribute)
    return registry
