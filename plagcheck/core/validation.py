"""
Input validation and error types for the plagiarism checker.

Two failure classes reach the caller: ``ValidationError`` when the supplied
input violates a precondition (bad path, empty document, bad weight) and
``DocumentIOError`` when reading or writing storage fails. The scoring core
itself never raises for text input.
"""

import inspect
from functools import wraps
from pathlib import Path
from typing import Any, Iterable, Optional, Union


class ValidationError(Exception):
    """Base class for invalid-argument errors."""

    def __init__(self, message: str, field: str = None, value: Any = None):
        self.message = message
        self.field = field
        self.value = value
        super().__init__(self.message)


class FileValidationError(ValidationError):
    """Raised when a document or output path is unusable."""
    pass


class ParameterValidationError(ValidationError):
    """Raised for invalid parameters and settings."""
    pass


class DocumentIOError(Exception):
    """Raised when reading or writing a document fails at the storage level."""

    def __init__(self, message: str, path: Union[str, Path, None] = None):
        self.message = message
        self.path = str(path) if path is not None else None
        super().__init__(self.message)


class FileValidator:
    """File path checks used by the command line shell."""

    ALLOWED_TEXT_EXTENSIONS = {'.txt', '.text', '.md', ''}
    MAX_FILE_SIZE_MB = 50

    @staticmethod
    def validate_file_path(file_path: Union[str, Path],
                           must_exist: bool = True,
                           allowed_extensions: Optional[set] = None,
                           max_size_mb: Optional[float] = None,
                           field: str = "file_path") -> Path:
        """
        Validate a path to an input file.

        Args:
            file_path: Path to the file
            must_exist: Whether the file must exist
            allowed_extensions: Set of allowed suffixes (lowercase, with dot)
            max_size_mb: Maximum file size in MB
            field: Name reported in the error

        Returns:
            Path object

        Raises:
            FileValidationError: If validation fails
        """
        if file_path is None or not str(file_path).strip():
            raise FileValidationError("File path cannot be empty", field=field, value=file_path)

        path = Path(file_path)

        try:
            if must_exist and not path.exists():
                raise FileValidationError(f"File does not exist: {file_path}", field=field, value=file_path)

            if must_exist and not path.is_file():
                raise FileValidationError(f"Path is not a file: {file_path}", field=field, value=file_path)
        except OSError as e:
            # e.g. ENAMETOOLONG, which exists() re-raises
            raise FileValidationError(f"Unusable path: {e.strerror}", field=field, value=file_path) from e

        if allowed_extensions is not None and path.suffix.lower() not in allowed_extensions:
            raise FileValidationError(
                f"File extension not allowed. Allowed: {sorted(allowed_extensions)}, got: {path.suffix}",
                field=field,
                value=file_path
            )

        if must_exist and max_size_mb:
            try:
                size_mb = path.stat().st_size / (1024 * 1024)
            except OSError as e:
                raise FileValidationError(f"Cannot stat file: {e.strerror}", field=field, value=file_path) from e
            if size_mb > max_size_mb:
                raise FileValidationError(
                    f"File too large: {size_mb:.1f}MB (max: {max_size_mb}MB)",
                    field=field,
                    value=file_path
                )

        return path

    @staticmethod
    def validate_text_file(file_path: Union[str, Path], field: str = "file_path") -> Path:
        """Validate an existing input document."""
        return FileValidator.validate_file_path(
            file_path,
            must_exist=True,
            max_size_mb=FileValidator.MAX_FILE_SIZE_MB,
            field=field
        )

    @staticmethod
    def validate_output_path(file_path: Union[str, Path], field: str = "output_path") -> Path:
        """
        Validate a destination for the result file.

        The file itself may not exist yet, but the path must not point at a
        directory.
        """
        path = FileValidator.validate_file_path(file_path, must_exist=False, field=field)
        try:
            is_dir = path.is_dir()
        except OSError as e:
            raise FileValidationError(f"Unusable path: {e.strerror}", field=field, value=file_path) from e
        if is_dir:
            raise FileValidationError(f"Output path is a directory: {file_path}", field=field, value=file_path)
        return path


class ParameterValidator:
    """Parameter validation utilities."""

    @staticmethod
    def validate_positive_integer(value: Any, field: str, min_value: int = 1, max_value: Optional[int] = None) -> int:
        """Validate an integer parameter within bounds."""
        if isinstance(value, bool):
            raise ParameterValidationError(f"{field} must be an integer, got bool", field=field, value=value)

        if not isinstance(value, int):
            try:
                value = int(value)
            except (ValueError, TypeError):
                raise ParameterValidationError(
                    f"{field} must be an integer, got {type(value).__name__}",
                    field=field,
                    value=value
                )

        if value < min_value:
            raise ParameterValidationError(
                f"{field} must be >= {min_value}, got {value}",
                field=field,
                value=value
            )

        if max_value is not None and value > max_value:
            raise ParameterValidationError(
                f"{field} must be <= {max_value}, got {value}",
                field=field,
                value=value
            )

        return value

    @staticmethod
    def validate_unit_float(value: Any, field: str) -> float:
        """Validate a number in the closed interval [0, 1]."""
        if isinstance(value, bool):
            raise ParameterValidationError(f"{field} must be a number, got bool", field=field, value=value)

        if not isinstance(value, (int, float)):
            try:
                value = float(value)
            except (ValueError, TypeError):
                raise ParameterValidationError(
                    f"{field} must be a number, got {type(value).__name__}",
                    field=field,
                    value=value
                )

        value = float(value)
        if not 0.0 <= value <= 1.0:
            raise ParameterValidationError(
                f"{field} must be between 0 and 1, got {value}",
                field=field,
                value=value
            )

        return value

    @staticmethod
    def validate_choice(value: Any, field: str, choices: Iterable[str]) -> str:
        """Validate a string against a fixed set of choices (case-insensitive)."""
        choices = tuple(choices)
        if not isinstance(value, str) or value.strip().lower() not in choices:
            raise ParameterValidationError(
                f"{field} must be one of {choices}, got {value!r}",
                field=field,
                value=value
            )
        return value.strip().lower()


def validate_inputs(**validators):
    """
    Decorator to validate function inputs.

    Each keyword maps a parameter name to a callable that returns the
    validated (possibly coerced) value or raises.

    Args:
        **validators: Dict mapping parameter names to validation functions
    """
    def decorator(func):
        sig = inspect.signature(func)

        @wraps(func)
        def wrapper(*args, **kwargs):
            bound_args = sig.bind(*args, **kwargs)
            bound_args.apply_defaults()

            for param_name, validator in validators.items():
                if param_name in bound_args.arguments:
                    value = bound_args.arguments[param_name]
                    try:
                        bound_args.arguments[param_name] = validator(value)
                    except ValidationError:
                        raise
                    except Exception as e:
                        raise ParameterValidationError(
                            f"Validation failed for {param_name}: {str(e)}",
                            field=param_name,
                            value=value
                        ) from e

            return func(*bound_args.args, **bound_args.kwargs)
        return wrapper
    return decorator
