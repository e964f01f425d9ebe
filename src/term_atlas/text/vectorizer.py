"""TF-IDF term vectors for a cluster's documents."""

from functools import partial
from typing import Any

from sklearn.feature_extraction.text import TfidfVectorizer

from .tokenizer import STOPWORDS, tokenize

TermVector = dict[str, float]


def build_tokenizer(config: dict[str, Any] | None = None):
    """Return a one-argument tokenizer configured from the ``tokenizer`` section."""
    tok_cfg = (config or {}).get("tokenizer", {})
    extra = tok_cfg.get("extra_stopwords") or []
    return partial(
        tokenize,
        min_length=tok_cfg.get("min_length", 3),
        stopwords=STOPWORDS | frozenset(w.lower() for w in extra),
    )


def vectorize(documents: list[str], analyzer=tokenize) -> list[TermVector]:
    """Build one sparse TF-IDF vector per document, in input order.

    Term frequency is the raw count; idf is ``ln((1 + N) / (1 + df)) + 1``,
    which is what scikit-learn computes with ``smooth_idf=True``. Rows are
    left unnormalized.
    """
    if not documents:
        return []
    # TfidfVectorizer refuses an empty vocabulary
    if not any(analyzer(doc) for doc in documents):
        return [{} for _ in documents]

    vectorizer = TfidfVectorizer(
        analyzer=analyzer,
        lowercase=False,
        smooth_idf=True,
        sublinear_tf=False,
        norm=None,
    )
    matrix = vectorizer.fit_transform(documents).tocsr()
    terms = vectorizer.get_feature_names_out()

    vectors: list[TermVector] = []
    for i in range(matrix.shape[0]):
        start, end = matrix.indptr[i], matrix.indptr[i + 1]
        vectors.append({
            str(terms[col]): float(weight)
            for col, weight in zip(matrix.indices[start:end], matrix.data[start:end])
        })
    return vectors


def top_terms(vectors: list[TermVector], n: int = 5) -> list[str]:
    """Highest-weighted terms summed across vectors, ties broken alphabetically."""
    totals: dict[str, float] = {}
    for vec in vectors:
        for term, weight in vec.items():
            totals[term] = totals.get(term, 0.0) + weight
    ranked = sorted(totals.items(), key=lambda kv: (-kv[1], kv[0]))
    return [term for term, _ in ranked[:n]]
