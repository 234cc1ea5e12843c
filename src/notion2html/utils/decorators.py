#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/notion2html/utils/decorators.py
"""Utility decorators for optional-dependency features and timing.

"""

from __future__ import annotations

import importlib
import logging
import time
from contextlib import contextmanager
from functools import wraps
from typing import Any, Callable, Generator, List, Tuple

from notion2html.exceptions import DependencyError
from notion2html.utils.packages import check_version_requirement


def requires_dependencies(feature_name: str, packages: List[Tuple[str, str, str]]) -> Callable:
    """Check optional dependencies and versions before calling the function.

    Parameters
    ----------
    feature_name : str
        Name of the feature needing the packages (appears in error messages)
    packages : list of tuple
        Required packages as (install_name, import_name, version_spec) tuples where:
        - install_name: Package name for pip install (e.g., "beautifulsoup4")
        - import_name: Module name for import statement (e.g., "bs4")
        - version_spec: Version requirement (e.g., ">=4.9.0" or "" for any version)

    Returns
    -------
    Callable
        Decorated function that checks dependencies before execution

    Raises
    ------
    DependencyError
        If any required package is missing or has an incompatible version.

    Examples
    --------
        >>> @requires_dependencies("pretty", [("beautifulsoup4", "bs4", ">=4.9.0")])
        ... def prettify(html_text):
        ...     from bs4 import BeautifulSoup
        ...     return BeautifulSoup(html_text, "html.parser").prettify()

    """

    def decorator(func: Callable) -> Callable:
        @wraps(func)
        def wrapper(*args: Any, **kwargs: Any) -> Any:
            missing = []
            version_mismatches = []
            original_error = None

            for install_name, import_name, version_spec in packages:
                try:
                    importlib.import_module(import_name)
                except ImportError as e:
                    missing.append((install_name, version_spec))
                    if original_error is None:
                        original_error = e
                    continue

                if version_spec:
                    meets_requirement, installed_version = check_version_requirement(install_name, version_spec)
                    if not meets_requirement:
                        version_mismatches.append((install_name, version_spec, installed_version or "unknown"))

            if missing or version_mismatches:
                raise DependencyError(
                    feature_name=feature_name,
                    missing_packages=missing,
                    version_mismatches=version_mismatches,
                    original_import_error=original_error,
                ) from original_error

            return func(*args, **kwargs)

        return wrapper

    return decorator


@contextmanager
def debug_timer(logger: logging.Logger, operation: str) -> Generator[None, None, None]:
    """Log the elapsed time of the enclosed block at DEBUG level.

    Parameters
    ----------
    logger : logging.Logger
        Logger instance to use for DEBUG messages
    operation : str
        Description of the operation being timed (e.g., "Rendering page abc")

    Notes
    -----
    Time is only measured when the logger has DEBUG enabled. Nothing is logged
    if the block raises.

    """
    if logger.isEnabledFor(logging.DEBUG):
        start_time = time.perf_counter()
        yield
        elapsed = time.perf_counter() - start_time
        logger.debug(f"{operation} completed in {elapsed:.3f}s")
    else:
        yield
