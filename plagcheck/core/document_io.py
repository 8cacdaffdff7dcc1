import os
from pathlib import Path
from typing import Union

from .logging_config import LoggerMixin
from .validation import DocumentIOError, FileValidationError

PathLike = Union[str, Path]


class DocumentProcessor(LoggerMixin):
    """
    Reads documents as UTF-8 text and writes similarity results.

    OS level failures surface as DocumentIOError; content that is not valid
    UTF-8 is the caller's fault and surfaces as FileValidationError.
    """

    def __init__(self, encoding: str = 'utf-8'):
        self.encoding = encoding

    def read_document(self, file_path: PathLike) -> str:
        """
        Read a whole document.

        Args:
            file_path: Path to the document

        Returns:
            Decoded text

        Raises:
            FileValidationError: If the bytes are not valid text in the
                configured encoding
            DocumentIOError: If the file cannot be read
        """
        path = Path(file_path)
        try:
            data = path.read_bytes()
        except OSError as e:
            self.logger.error(f"Cannot read {path}: {e}", extra={'file_path': str(path)})
            raise DocumentIOError(f"Cannot read file: {path}, error: {e}", path=path) from e

        try:
            text = data.decode(self.encoding)
        except UnicodeDecodeError as e:
            raise FileValidationError(
                f"File is not valid {self.encoding} text: {path}",
                field="file_path",
                value=str(path)
            ) from e

        self.logger.debug(f"Read {len(text)} characters from {path}", extra={'file_path': str(path)})
        return text

    def write_result(self, file_path: PathLike, similarity: float) -> None:
        """
        Write the similarity formatted to two decimal places.

        Raises:
            DocumentIOError: If the file cannot be written
        """
        path = Path(file_path)
        try:
            if not path.parent.exists():
                path.parent.mkdir(parents=True, exist_ok=True)
            path.write_text(f"{similarity:.2f}", encoding=self.encoding)
        except OSError as e:
            self.logger.error(f"Cannot write {path}: {e}", extra={'file_path': str(path)})
            raise DocumentIOError(f"Cannot write file: {path}, error: {e}", path=path) from e

        self.logger.debug(f"Wrote result {similarity:.2f} to {path}", extra={'file_path': str(path)})

    @staticmethod
    def file_exists(file_path: PathLike) -> bool:
        return Path(file_path).exists()

    @staticmethod
    def get_file_size(file_path: PathLike) -> int:
        """
        Size of a file in bytes.

        Raises:
            DocumentIOError: If the file cannot be inspected
        """
        try:
            return os.path.getsize(file_path)
        except OSError as e:
            raise DocumentIOError(f"Cannot stat file: {file_path}, error: {e}", path=file_path) from e

    @staticmethod
    def is_valid_path(file_path) -> bool:
        """A path is valid when it is a non-blank string without NUL bytes."""
        if file_path is None:
            return False
        text = str(file_path)
        return bool(text.strip()) and '\x00' not in text
