#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Custom exceptions for the notion2html library.

This module defines specialized exception classes for the error conditions
that can occur while parsing inline content and rendering pages. Rendering
distinguishes two failure channels:

- Soft failures (unknown block types, malformed dates, degenerate tables) are
  logged and degrade gracefully; with ``strict_mode`` enabled they are raised
  as ``RenderingError`` instead.
- Invariant violations (negative indentation, buffer stack underflow, an
  unbalanced traversal) always raise ``RenderInvariantError``. They indicate a
  renderer bug or a misbehaving override, never malformed input.

Exception Hierarchy
-------------------
- Notion2HtmlError (base exception)

  - ValidationError (parameter/option validation)
    - InvalidOptionsError (wrong options class for renderer)

  - ParsingError (collaborator input parsing failures)
    - InlineParseError (malformed rich-text property values)
    - DateParseError (malformed date/time literals)

  - RenderingError (soft failure escalated by strict mode)

  - RenderInvariantError (fatal renderer invariant violations)

  - DependencyError (missing/incompatible optional packages)

"""

from typing import Any


class Notion2HtmlError(Exception):
    """Base exception class for all notion2html-specific errors.

    Parameters
    ----------
    message : str
        Human-readable description of the error
    original_error : Exception, optional
        The original exception that caused this error, if applicable

    Attributes
    ----------
    message : str
        The error message
    original_error : Exception or None
        The wrapped original exception, if any

    """

    def __init__(self, message: str, original_error: Exception | None = None):
        """Initialize the error with a message and optional original exception."""
        super().__init__(message)
        self.message = message
        self.original_error = original_error


class ValidationError(Notion2HtmlError):
    """Exception raised for invalid input parameters or options.

    Parameters
    ----------
    message : str
        Description of the validation error
    parameter_name : str, optional
        Name of the invalid parameter
    parameter_value : any, optional
        The invalid value that was provided
    original_error : Exception, optional
        The original exception that caused this error

    """

    def __init__(
        self,
        message: str,
        parameter_name: str | None = None,
        parameter_value: Any = None,
        original_error: Exception | None = None,
    ):
        """Initialize the validation error with parameter details."""
        super().__init__(message, original_error=original_error)
        self.parameter_name = parameter_name
        self.parameter_value = parameter_value


class InvalidOptionsError(ValidationError):
    """Exception raised when an incorrect options class is given to a renderer.

    Parameters
    ----------
    renderer_name : str
        Name of the renderer that received invalid options
    expected_type : type
        The expected options class type
    received_type : type
        The actual options class type that was received
    message : str, optional
        Custom error message. If not provided, generates a helpful message
    original_error : Exception, optional
        The original exception that caused this error

    """

    def __init__(
        self,
        renderer_name: str,
        expected_type: type,
        received_type: type,
        message: str | None = None,
        original_error: Exception | None = None,
    ):
        """Initialize the invalid options error."""
        if message is None:
            message = (
                f"{renderer_name} expected options of type '{expected_type.__name__}' "
                f"but received '{received_type.__name__}'."
            )
        super().__init__(
            message, parameter_name="options", parameter_value=received_type, original_error=original_error
        )
        self.renderer_name = renderer_name
        self.expected_type = expected_type
        self.received_type = received_type


class ParsingError(Notion2HtmlError):
    """Exception raised when collaborator input cannot be parsed.

    Parameters
    ----------
    message : str
        Description of the parsing failure
    parsing_stage : str, optional
        The stage of parsing where the error occurred
    original_error : Exception, optional
        The underlying exception that caused the parsing failure

    """

    def __init__(self, message: str, parsing_stage: str | None = None, original_error: Exception | None = None):
        """Initialize the parsing error."""
        super().__init__(message, original_error)
        self.parsing_stage = parsing_stage


class InlineParseError(ParsingError):
    """Exception raised when a raw rich-text value is structurally invalid.

    Parameters
    ----------
    message : str
        Description of the problem
    value : any, optional
        The raw value that failed to parse

    """

    def __init__(self, message: str, value: Any = None, original_error: Exception | None = None):
        """Initialize the inline parse error."""
        super().__init__(message, parsing_stage="inline", original_error=original_error)
        self.value = value


class DateParseError(ParsingError):
    """Exception raised when a Notion date or time literal is malformed."""

    def __init__(self, message: str, literal: str = "", original_error: Exception | None = None):
        """Initialize the date parse error."""
        super().__init__(message, parsing_stage="date", original_error=original_error)
        self.literal = literal


class RenderingError(Notion2HtmlError):
    """Exception raised when rendering cannot complete.

    Raised for soft failures (unknown block types, malformed dates, degenerate
    tables) when strict mode is enabled, and when a renderer instance is
    re-entered while it is already rendering.

    Parameters
    ----------
    message : str
        Description of the rendering failure
    rendering_stage : str, optional
        The stage of rendering where the error occurred
    original_error : Exception, optional
        The underlying exception that caused the rendering failure

    """

    def __init__(self, message: str, rendering_stage: str | None = None, original_error: Exception | None = None):
        """Initialize the rendering error."""
        super().__init__(message, original_error)
        self.rendering_stage = rendering_stage


class RenderInvariantError(Notion2HtmlError):
    """Exception raised when an internal renderer invariant is violated.

    These errors are raised regardless of strict mode. Output produced before
    the violation is discarded.

    """


class DependencyError(Notion2HtmlError):
    """Exception raised when optional dependencies are not available.

    Parameters
    ----------
    feature_name : str
        Name of the feature requiring dependencies
    missing_packages : list[tuple[str, str]]
        List of (package_name, version_spec) tuples for missing packages
    version_mismatches : list[tuple[str, str, str]], optional
        List of (package_name, required_version, installed_version) tuples
    install_command : str, optional
        Suggested pip install command to resolve the issue
    message : str, optional
        Custom error message. If not provided, generates a helpful message
    original_import_error : ImportError, optional
        The ImportError raised while importing the package

    """

    def __init__(
        self,
        feature_name: str,
        missing_packages: list[tuple[str, str]],
        version_mismatches: list[tuple[str, str, str]] | None = None,
        install_command: str = "",
        message: str | None = None,
        original_import_error: ImportError | None = None,
    ):
        """Initialize the dependency error with package details."""
        version_mismatches = version_mismatches or []
        self.original_import_error = original_import_error
        if message is None:
            message_parts = []

            if missing_packages:
                pkg_list = ", ".join(f"'{name}{spec}'" if spec else f"'{name}'" for name, spec in missing_packages)
                message_parts.append(f"{feature_name.upper()} output requires the following packages: {pkg_list}")

            if version_mismatches:
                mismatch_str = ", ".join(
                    f"'{name}' (requires {required}, but {installed} is installed)"
                    for name, required, installed in version_mismatches
                )
                message_parts.append(f"{feature_name.upper()} output has version mismatches: {mismatch_str}")

            message = "\n".join(message_parts)

            if install_command:
                message += f"\nInstall with: {install_command}"
            else:
                all_packages = missing_packages + [(name, req) for name, req, _ in version_mismatches]
                if all_packages:
                    packages_str = " ".join(f'"{name}{spec}"' if spec else name for name, spec in all_packages)
                    message += f"\nInstall with: pip install --upgrade {packages_str}"

        super().__init__(message)
        self.feature_name = feature_name
        self.missing_packages = missing_packages
        self.version_mismatches = version_mismatches
        self.install_command = install_command
