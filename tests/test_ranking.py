"""Tests for TF-IDF scoring and top-k selection."""

import math

import pytest

from searchserver_core.ranking import (
    MAX_RESULT_DOCUMENT_COUNT,
    Document,
    ScoringContext,
    TFIDFScorer,
    rank_documents,
)


class TestTFIDFScorer:
    def test_idf_is_natural_log(self):
        scorer = TFIDFScorer()
        assert scorer.idf(1, ScoringContext(total_docs=3)) == pytest.approx(math.log(3))

    def test_term_in_every_document(self):
        assert TFIDFScorer().idf(4, ScoringContext(total_docs=4)) == 0.0

    def test_empty_corpus(self):
        assert TFIDFScorer().idf(0, ScoringContext(total_docs=0)) == 0.0

    def test_score(self):
        score = TFIDFScorer().score(0.5, 1, ScoringContext(total_docs=3))
        assert score == pytest.approx(0.5 * math.log(3))


class TestRankDocuments:
    def test_sorted_by_relevance(self):
        docs = [Document(1, 0.1, 0), Document(2, 0.9, 0), Document(3, 0.5, 0)]
        assert [d.id for d in rank_documents(docs)] == [2, 3, 1]

    def test_close_relevance_ranked_by_rating(self):
        docs = [Document(1, 0.5, 1), Document(2, 0.5 + 1e-7, -4), Document(3, 0.5 - 1e-7, 9)]
        assert [d.id for d in rank_documents(docs)] == [3, 1, 2]

    def test_distinct_relevance_beats_rating(self):
        docs = [Document(1, 0.5, 100), Document(2, 0.5 + 1e-5, 0)]
        assert [d.id for d in rank_documents(docs)] == [2, 1]

    def test_truncated(self):
        docs = [Document(i, i / 10, 0) for i in range(8)]
        ranked = rank_documents(docs)
        assert len(ranked) == MAX_RESULT_DOCUMENT_COUNT == 5
        assert [d.id for d in ranked] == [7, 6, 5, 4, 3]

    def test_custom_limit(self):
        docs = [Document(i, 1.0, i) for i in range(4)]
        assert [d.id for d in rank_documents(docs, limit=2)] == [3, 2]

    def test_empty(self):
        assert rank_documents([]) == []


def test_document_str():
    doc = Document(id=1, relevance=0.6506724213, rating=5)
    assert str(doc) == "{ document_id = 1, relevance = 0.650672, rating = 5 }"
