"""Tests for tokenization, TF-IDF vectors and similarity."""

import math

import pytest

from term_atlas.text import (
    build_tokenizer,
    cosine_similarity,
    similarity_matrix,
    tokenize,
    top_terms,
    vectorize,
)


def test_tokenize_basic():
    assert tokenize("The Quick, brown-fox! is ok") == ["quick", "brown", "fox"]


def test_tokenize_keeps_digits_drops_short():
    assert tokenize("Top 10 of 2024") == ["top", "2024"]


def test_tokenize_empty():
    assert tokenize("") == []
    assert tokenize(None) == []
    assert tokenize("!!! ... ??") == []


def test_build_tokenizer_extra_stopwords():
    tok = build_tokenizer({"tokenizer": {"extra_stopwords": ["Slang"]}})
    assert tok("slang word for shade") == ["word", "shade"]


def test_vectorize_smoothed_idf():
    vectors = vectorize(["apple apple banana", "apple cherry"])
    banana_idf = math.log(3 / 2) + 1
    assert vectors[0]["apple"] == pytest.approx(2.0)  # df == N keeps idf at 1
    assert vectors[0]["banana"] == pytest.approx(banana_idf)
    assert vectors[1]["cherry"] == pytest.approx(banana_idf)
    assert "cherry" not in vectors[0]


def test_vectorize_empty_inputs():
    assert vectorize([]) == []
    assert vectorize(["the and", ""]) == [{}, {}]
    vectors = vectorize(["", "apple"])
    assert vectors[0] == {}
    assert set(vectors[1]) == {"apple"}


def test_cosine_zero_vectors():
    assert cosine_similarity({}, {"a": 1.0}) == 0.0
    assert cosine_similarity({}, {}) == 0.0


def test_shared_tokens_more_similar():
    vectors = vectorize([
        "throw shade hard",
        "throw shade often",
        "completely different wording",
    ])
    sim_12 = cosine_similarity(vectors[0], vectors[1])
    sim_13 = cosine_similarity(vectors[0], vectors[2])
    sim_23 = cosine_similarity(vectors[1], vectors[2])
    assert sim_12 > 0
    assert sim_12 > sim_13
    assert sim_12 > sim_23
    assert cosine_similarity(vectors[1], vectors[0]) == sim_12


def test_similarity_matrix_properties():
    vectors = vectorize([
        "spill the tea gossip",
        "tea gossip drama",
        "no cap honest truth",
        "",
        "honest truth only",
    ])
    sim = similarity_matrix(vectors)
    assert sim.shape == (5, 5)
    assert (sim == sim.T).all()
    assert (sim.diagonal() == 0).all()
    assert (sim >= 0).all() and (sim <= 1).all()
    assert (sim[3] == 0).all()


def test_top_terms():
    vectors = [{"tea": 2.0, "gossip": 1.0}, {"tea": 1.0, "drama": 1.0}]
    assert top_terms(vectors, 2) == ["tea", "drama"]
