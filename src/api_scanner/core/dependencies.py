"""Pre-flight check for the libraries and tools a scan relies on."""

from __future__ import annotations

import importlib.util
import shutil
from typing import Iterable

from api_scanner.core.exceptions import DependencyError
from api_scanner.core.logging import get_logger

logger = get_logger(__name__)

# httpx carries every request; the probes are not imported until it resolves
REQUIRED_MODULES = ("httpx",)


def check_dependencies(
    modules: Iterable[str] = REQUIRED_MODULES,
    tools: Iterable[str] = (),
) -> None:
    """Confirm each required module imports and each tool is on PATH.

    Stops at the first missing dependency.

    Raises:
        DependencyError: naming the first dependency that does not resolve
    """
    modules = tuple(modules)
    tools = tuple(tools)

    for module in modules:
        if importlib.util.find_spec(module) is None:
            logger.error("dependency_missing", name=module, kind="module")
            raise DependencyError(module, kind="module")

    for tool in tools:
        if shutil.which(tool) is None:
            logger.error("dependency_missing", name=tool, kind="tool")
            raise DependencyError(tool, kind="tool")

    logger.debug("dependencies_ok", modules=modules, tools=tools)
