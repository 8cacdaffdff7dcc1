import math
from dataclasses import asdict, dataclass
from typing import Any, Dict, Optional

from .config import Settings
from .language_detector import DEFAULT_MIXED_THRESHOLD, TextLanguage, detect_language
from .logging_config import LoggerMixin
from .sequence_similarity import BACKENDS, character_similarity, edit_distance_similarity
from .text_normalizer import normalize_text
from .validation import ParameterValidationError, ParameterValidator, validate_inputs
from .vector_similarity import cosine_similarity


@dataclass(frozen=True)
class SimilarityWeights:
    """Weights of the three measures in the comprehensive score."""

    cosine: float = 0.5
    edit_distance: float = 0.3
    character: float = 0.2

    def __post_init__(self):
        for field in ('cosine', 'edit_distance', 'character'):
            ParameterValidator.validate_unit_float(getattr(self, field), f"weights.{field}")
        total = self.cosine + self.edit_distance + self.character
        if abs(total - 1.0) > 1e-9:
            raise ParameterValidationError(
                f"Similarity weights must sum to 1, got {total}",
                field="weights",
                value=(self.cosine, self.edit_distance, self.character)
            )


DEFAULT_WEIGHTS = SimilarityWeights()


def combine_scores(cosine: float, edit_distance: float, character: float,
                   weights: SimilarityWeights = DEFAULT_WEIGHTS) -> float:
    """Weighted sum of the three measures, clamped to [0, 1]."""
    combined = math.fsum((weights.cosine * cosine,
                          weights.edit_distance * edit_distance,
                          weights.character * character))
    return min(1.0, max(0.0, combined))


@dataclass(frozen=True)
class SimilarityReport:
    """Breakdown of one document comparison."""

    cosine: float
    edit_distance: float
    character: float
    comprehensive: float
    language1: TextLanguage
    language2: TextLanguage
    normalized_length1: int
    normalized_length2: int

    def to_dict(self) -> Dict[str, Any]:
        data = asdict(self)
        data['language1'] = self.language1.value
        data['language2'] = self.language2.value
        return data


class SimilarityCalculator(LoggerMixin):
    """
    Scores how similar two texts are by combining token cosine similarity,
    edit distance similarity and longest common subsequence similarity.

    Instances hold only configuration, so one calculator can be shared
    across threads.
    """

    @validate_inputs(
        weights=lambda x: DEFAULT_WEIGHTS if x is None else x,
        backend=lambda x: ParameterValidator.validate_choice(x, "backend", BACKENDS),
        mixed_threshold=lambda x: ParameterValidator.validate_unit_float(x, "mixed_threshold")
    )
    def __init__(self,
                 weights: Optional[SimilarityWeights] = None,
                 backend: str = 'python',
                 mixed_threshold: float = DEFAULT_MIXED_THRESHOLD):
        """
        Args:
            weights: Weights for the comprehensive score
            backend: Sequence measure backend, ``python`` or ``rapidfuzz``
            mixed_threshold: Minority script share for a MIXED language label

        Raises:
            ParameterValidationError: If parameters are invalid
        """
        if not isinstance(weights, SimilarityWeights):
            raise ParameterValidationError(
                f"weights must be SimilarityWeights, got {type(weights).__name__}",
                field="weights",
                value=weights
            )
        self.weights = weights
        self.backend = backend
        self.mixed_threshold = mixed_threshold

    @classmethod
    def from_settings(cls, settings: Settings) -> "SimilarityCalculator":
        weights = SimilarityWeights(
            cosine=settings.weight_cosine,
            edit_distance=settings.weight_edit,
            character=settings.weight_character,
        )
        return cls(weights=weights, backend=settings.backend, mixed_threshold=settings.mixed_threshold)

    def preprocess_text(self, text: Optional[str]) -> str:
        return normalize_text(text)

    def calculate_cosine_similarity(self, text1: str, text2: str) -> float:
        return cosine_similarity(text1, text2)

    def calculate_edit_distance_similarity(self, text1: Optional[str], text2: Optional[str]) -> float:
        return edit_distance_similarity(text1, text2, backend=self.backend)

    def calculate_character_similarity(self, text1: Optional[str], text2: Optional[str]) -> float:
        return character_similarity(text1, text2, backend=self.backend)

    def detect_language(self, text: Optional[str]) -> TextLanguage:
        return detect_language(text, mixed_threshold=self.mixed_threshold)

    def calculate_comprehensive_similarity(self, text1: Optional[str], text2: Optional[str]) -> float:
        """
        Comprehensive similarity of two raw texts.

        Args:
            text1: First raw text, or None
            text2: Second raw text, or None

        Returns:
            0.0 when exactly one text is None; 1.0 when both texts are empty
            after normalization; otherwise the weighted sum of the three
            measures. Always within [0, 1].
        """
        return self.compare(text1, text2).comprehensive

    def compare(self, text1: Optional[str], text2: Optional[str]) -> SimilarityReport:
        """
        Compare two raw texts and return every intermediate score.

        See :meth:`calculate_comprehensive_similarity` for the special cases.
        """
        language1 = self.detect_language(text1)
        language2 = self.detect_language(text2)

        if (text1 is None) != (text2 is None):
            self.logger.debug("One text is missing, similarity is 0")
            return SimilarityReport(0.0, 0.0, 0.0, 0.0, language1, language2,
                                    len(normalize_text(text1)), len(normalize_text(text2)))

        processed1 = self.preprocess_text(text1)
        processed2 = self.preprocess_text(text2)

        if not processed1 and not processed2:
            # Nothing left to compare on either side: treated as identical documents
            self.logger.debug("Both texts are empty after normalization, similarity is 1")
            return SimilarityReport(0.0, 1.0, 1.0, 1.0, language1, language2, 0, 0)

        cosine = self.calculate_cosine_similarity(processed1, processed2)
        edit = self.calculate_edit_distance_similarity(processed1, processed2)
        character = self.calculate_character_similarity(processed1, processed2)
        comprehensive = combine_scores(cosine, edit, character, self.weights)

        self.logger.debug(
            f"Similarity cosine={cosine:.4f} edit={edit:.4f} character={character:.4f} "
            f"comprehensive={comprehensive:.4f}",
            extra={'text_length': (len(processed1), len(processed2)), 'backend': self.backend}
        )

        return SimilarityReport(
            cosine=cosine,
            edit_distance=edit,
            character=character,
            comprehensive=comprehensive,
            language1=language1,
            language2=language2,
            normalized_length1=len(processed1),
            normalized_length2=len(processed2),
        )


_default_calculator = SimilarityCalculator()


def score(text1: Optional[str], text2: Optional[str]) -> float:
    """Comprehensive similarity of two raw texts with the default weights."""
    return _default_calculator.calculate_comprehensive_similarity(text1, text2)


def classify_language(text: Optional[str]) -> TextLanguage:
    """Dominant script label of a raw text."""
    return _default_calculator.detect_language(text)
