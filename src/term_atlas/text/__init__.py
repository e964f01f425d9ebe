"""Text processing: tokenization, TF-IDF vectors and similarity."""

from .tokenizer import STOPWORDS, tokenize
from .vectorizer import TermVector, build_tokenizer, top_terms, vectorize
from .similarity import cosine_similarity, similarity_matrix

__all__ = [
    "STOPWORDS",
    "TermVector",
    "build_tokenizer",
    "cosine_similarity",
    "similarity_matrix",
    "tokenize",
    "top_terms",
    "vectorize",
]
