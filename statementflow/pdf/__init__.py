"""PDF processing module."""
from .processor import PDFProcessor
from .turkish_normalizer import TurkishNormalizer

__all__ = ["PDFProcessor", "TurkishNormalizer"]
