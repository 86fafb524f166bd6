#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/prettydiff/exceptions.py
"""Custom exceptions for the prettydiff library.

Rendering a difference sequence never fails on well-formed input, so the
hierarchy is small: it covers values rejected when they are constructed
(configuration, segments, hunks) and the file handling done by the CLI.

Exception Hierarchy
-------------------
- PrettyDiffError (base exception)

  - ValidationError (parameter/option validation)
    - ConfigError (invalid configuration file contents)

  - FileError (file access and I/O)

"""

from typing import Any


class PrettyDiffError(Exception):
    """Base exception class for all prettydiff-specific errors.

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


class ValidationError(PrettyDiffError):
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

    Attributes
    ----------
    parameter_name : str or None
        The name of the problematic parameter
    parameter_value : any
        The value that caused the error

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


class ConfigError(ValidationError):
    """Exception raised when a configuration file cannot be used.

    Covers unreadable or malformed TOML/YAML/JSON files as well as
    well-formed files with unknown keys or values of the wrong type.

    Parameters
    ----------
    message : str
        Description of the configuration problem
    config_path : str, optional
        Path to the offending configuration file
    parameter_name : str, optional
        Configuration key that was rejected
    parameter_value : any, optional
        Value that was rejected
    original_error : Exception, optional
        The original exception that caused this error

    """

    def __init__(
        self,
        message: str,
        config_path: str | None = None,
        parameter_name: str | None = None,
        parameter_value: Any = None,
        original_error: Exception | None = None,
    ):
        """Initialize the config error with the path of the config file."""
        super().__init__(
            message,
            parameter_name=parameter_name,
            parameter_value=parameter_value,
            original_error=original_error,
        )
        self.config_path = config_path


class FileError(PrettyDiffError):
    """Base exception for file access and I/O errors.

    Parameters
    ----------
    message : str
        Description of the file error
    file_path : str, optional
        Path to the problematic file
    original_error : Exception, optional
        The original exception that caused this error

    Attributes
    ----------
    file_path : str or None
        Path to the file that caused the error

    """

    def __init__(self, message: str, file_path: str | None = None, original_error: Exception | None = None):
        """Initialize the file error with path and message."""
        super().__init__(message, original_error=original_error)
        self.file_path = file_path


__all__ = [
    "PrettyDiffError",
    "ValidationError",
    "ConfigError",
    "FileError",
]
