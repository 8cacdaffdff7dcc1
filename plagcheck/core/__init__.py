"""
Core functionality for document similarity scoring.

This package contains the scoring algorithms and the thin file shell:
- Text normalization
- Token cosine similarity
- Edit distance and longest common subsequence similarity
- Comprehensive weighted score and language labelling
- Document reading and result writing
"""

from .text_normalizer import normalize_text, tokenize
from .vector_similarity import build_frequency_vector, cosine_similarity
from .sequence_similarity import (
    levenshtein_distance, lcs_length, edit_distance_similarity, character_similarity
)
from .language_detector import TextLanguage, count_scripts, detect_language
from .similarity_calculator import (
    SimilarityWeights, SimilarityReport, SimilarityCalculator,
    DEFAULT_WEIGHTS, combine_scores, score, classify_language
)
from .document_io import DocumentProcessor
from .plagiarism_detector import PlagiarismDetector
from .config import Settings, load_settings
from .logging_config import setup_logging, get_logger, LoggerMixin, ProductionLogger
from .validation import (
    ValidationError, FileValidationError, ParameterValidationError, DocumentIOError,
    FileValidator, ParameterValidator, validate_inputs
)

__all__ = [
    'normalize_text',
    'tokenize',
    'build_frequency_vector',
    'cosine_similarity',
    'levenshtein_distance',
    'lcs_length',
    'edit_distance_similarity',
    'character_similarity',
    'TextLanguage',
    'count_scripts',
    'detect_language',
    'SimilarityWeights',
    'SimilarityReport',
    'SimilarityCalculator',
    'DEFAULT_WEIGHTS',
    'combine_scores',
    'score',
    'classify_language',
    'DocumentProcessor',
    'PlagiarismDetector',
    'Settings',
    'load_settings',
    'setup_logging',
    'get_logger',
    'LoggerMixin',
    'ProductionLogger',
    'ValidationError',
    'FileValidationError',
    'ParameterValidationError',
    'DocumentIOError',
    'FileValidator',
    'ParameterValidator',
    'validate_inputs'
]
