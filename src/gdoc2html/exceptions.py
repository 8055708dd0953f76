#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Custom exceptions for the gdoc2html library.

This module defines specialized exception classes for the error conditions
that can occur while loading, fetching and rendering documents. Rendering of
document content itself is best-effort and never raises for malformed
fragments; these exceptions cover the boundaries around it.

Exception Hierarchy
-------------------
- Gdoc2HtmlError (base exception)

  - ValidationError (parameter/option validation)
    - InvalidOptionsError (wrong options class for parser or renderer)

  - ParsingError (input document loading failures)
    - MalformedDocumentError (input is not a JSON document object)

  - RenderingError (output generation failures)
    - OutputWriteError (file write failures)

  - DocumentFetchError (document service retrieval failures)

  - DependencyError (missing/incompatible packages)

"""

from typing import Any


class Gdoc2HtmlError(Exception):
    """Base exception class for all gdoc2html-specific errors.

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


class ValidationError(Gdoc2HtmlError):
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
    """Exception raised when an incorrect options class is provided.

    Parameters
    ----------
    converter_name : str
        Name of the parser or renderer that received invalid options
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
        converter_name: str,
        expected_type: type,
        received_type: type,
        message: str | None = None,
        original_error: Exception | None = None,
    ):
        """Initialize the invalid options error."""
        if message is None:
            message = (
                f"{converter_name} expected options of type '{expected_type.__name__}' "
                f"but received '{received_type.__name__}'."
            )
        super().__init__(
            message, parameter_name="options", parameter_value=received_type, original_error=original_error
        )
        self.converter_name = converter_name
        self.expected_type = expected_type
        self.received_type = received_type


class ParsingError(Gdoc2HtmlError):
    """Exception raised when loading an input document fails.

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


class MalformedDocumentError(ParsingError):
    """Exception raised when the input is not a document object at all.

    Missing optional fields never raise; this is reserved for input that
    cannot be interpreted as a JSON object (a list, a number, invalid JSON).

    Parameters
    ----------
    message : str, optional
        Custom error message
    received_type : type, optional
        Type of the value that was received
    original_error : Exception, optional
        The original exception that caused this error

    """

    def __init__(
        self, message: str | None = None, received_type: type | None = None, original_error: Exception | None = None
    ):
        """Initialize the malformed document error."""
        if message is None:
            if received_type is not None:
                message = f"Expected a JSON document object, got {received_type.__name__}"
            else:
                message = "Input is not a valid JSON document object"
        super().__init__(message, parsing_stage="document_structure", original_error=original_error)
        self.received_type = received_type


class RenderingError(Gdoc2HtmlError):
    """Exception raised when output rendering fails.

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


class OutputWriteError(RenderingError):
    """Exception raised when writing an output file fails.

    Parameters
    ----------
    file_path : str
        Path to the output file that failed to write
    message : str, optional
        Custom error message. If not provided, uses default message
    original_error : Exception, optional
        The original exception that caused this error

    """

    def __init__(self, file_path: str, message: str | None = None, original_error: Exception | None = None):
        """Initialize the output write error."""
        if message is None:
            message = f"Failed to write output file: {file_path}"
        super().__init__(message, rendering_stage="file_write", original_error=original_error)
        self.file_path = file_path


class DocumentFetchError(Gdoc2HtmlError):
    """Exception raised when the document service cannot return a resource.

    The error is retrievable: callers may retry, no retry policy is applied
    by the library.

    Parameters
    ----------
    message : str
        Description of the failure
    resource_id : str, optional
        Document or folder identifier that was requested
    status_code : int, optional
        HTTP status code returned by the service, if any
    original_error : Exception, optional
        The underlying transport exception

    """

    def __init__(
        self,
        message: str,
        resource_id: str | None = None,
        status_code: int | None = None,
        original_error: Exception | None = None,
    ):
        """Initialize the fetch error with request details."""
        super().__init__(message, original_error)
        self.resource_id = resource_id
        self.status_code = status_code


class DependencyError(Gdoc2HtmlError):
    """Exception raised when required dependencies are not available.

    Parameters
    ----------
    converter_name : str
        Name of the feature requiring dependencies
    missing_packages : list[tuple[str, str]]
        List of (package_name, version_spec) tuples for missing packages
    version_mismatches : list[tuple[str, str, str]], optional
        List of (package_name, required_version, installed_version) tuples
    install_command : str, optional
        Suggested pip install command to resolve the issue
    message : str, optional
        Custom error message. If not provided, generates a helpful message

    """

    def __init__(
        self,
        converter_name: str,
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
                message_parts.append(f"{converter_name} requires the following packages: {pkg_list}")

            if version_mismatches:
                mismatch_details = [
                    f"'{name}' (requires {required}, but {installed} is installed)"
                    for name, required, installed in version_mismatches
                ]
                message_parts.append(f"{converter_name} has version mismatches: {', '.join(mismatch_details)}")

            message = "\n".join(message_parts)

            if install_command:
                message += f"\nInstall with: {install_command}"
            else:
                all_packages = missing_packages + [(name, req) for name, req, _ in version_mismatches]
                if all_packages:
                    packages_str = " ".join(f'"{name}{spec}"' if spec else name for name, spec in all_packages)
                    message += f"\nInstall with: pip install --upgrade {packages_str}"

        super().__init__(message)
        self.converter_name = converter_name
        self.missing_packages = missing_packages
        self.version_mismatches = version_mismatches
        self.install_command = install_command
