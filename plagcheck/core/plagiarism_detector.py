from typing import Optional

from .config import DEFAULT_MAX_TEXT_LENGTH
from .document_io import DocumentProcessor, PathLike
from .logging_config import LoggerMixin
from .similarity_calculator import SimilarityCalculator, SimilarityReport
from .validation import FileValidationError, FileValidator, ParameterValidationError, ParameterValidator


class PlagiarismDetector(LoggerMixin):
    """
    Compares an original document with a suspected copy on disk and writes
    the comprehensive similarity to an output file.
    """

    def __init__(self,
                 calculator: Optional[SimilarityCalculator] = None,
                 processor: Optional[DocumentProcessor] = None,
                 max_text_length: int = DEFAULT_MAX_TEXT_LENGTH):
        """
        Args:
            calculator: Similarity calculator, default weights if None
            processor: Document reader/writer
            max_text_length: Documents longer than this are logged as
                expensive to compare; they are not truncated
        """
        self.calculator = calculator if calculator is not None else SimilarityCalculator()
        self.processor = processor if processor is not None else DocumentProcessor()
        self.max_text_length = ParameterValidator.validate_positive_integer(max_text_length, "max_text_length")

    def validate_inputs(self, original_path: PathLike, plagiarized_path: PathLike, output_path: PathLike) -> None:
        """
        Check all three paths before any work is done.

        Raises:
            FileValidationError: If a path is invalid or an input is missing
        """
        for field, value in (("original_path", original_path),
                             ("plagiarized_path", plagiarized_path),
                             ("output_path", output_path)):
            if not self.processor.is_valid_path(value):
                raise FileValidationError(f"Invalid {field.replace('_', ' ')}: {value!r}", field=field, value=value)

        FileValidator.validate_text_file(original_path, field="original_path")
        FileValidator.validate_text_file(plagiarized_path, field="plagiarized_path")
        FileValidator.validate_output_path(output_path)

    def _load(self, file_path: PathLike, field: str) -> str:
        text = self.processor.read_document(file_path)
        if not text.strip():
            raise ParameterValidationError(f"Document is empty: {file_path}", field=field, value=str(file_path))
        if len(text) > self.max_text_length:
            self.logger.warning(
                f"Document {file_path} has {len(text)} characters; comparison cost grows with the product "
                f"of both lengths",
                extra={'file_path': str(file_path), 'text_length': len(text)}
            )
        return text

    def compare_documents(self, original_path: PathLike, plagiarized_path: PathLike) -> SimilarityReport:
        """
        Read both documents and return the full comparison.

        Raises:
            ParameterValidationError: If a document is empty after trimming
            FileValidationError: If a document is not valid text
            DocumentIOError: If a document cannot be read
        """
        original_text = self._load(original_path, "original_path")
        plagiarized_text = self._load(plagiarized_path, "plagiarized_path")

        with self.log_operation("compare_documents", file_path=str(plagiarized_path)):
            return self.calculator.compare(original_text, plagiarized_text)

    def detect_plagiarism(self, original_path: PathLike, plagiarized_path: PathLike) -> float:
        """Comprehensive similarity of two documents on disk."""
        return self.compare_documents(original_path, plagiarized_path).comprehensive

    def run(self, original_path: PathLike, plagiarized_path: PathLike, output_path: PathLike) -> SimilarityReport:
        """
        Validate the paths, compare the documents and write the result.

        Nothing is written when any step fails.
        """
        self.validate_inputs(original_path, plagiarized_path, output_path)
        report = self.compare_documents(original_path, plagiarized_path)
        self.processor.write_result(output_path, report.comprehensive)
        self.logger.info(f"Similarity of {original_path} and {plagiarized_path}: {report.comprehensive:.2f}")
        return report
