"""Tests for the inverted index and the document store."""

import pytest

from searchserver_core.exceptions import DocumentNotFoundError, OutOfRangeError
from searchserver_core.index import (
    DocumentData,
    DocumentStatus,
    DocumentStore,
    InvertedIndex,
    compute_average_rating,
)


class TestInvertedIndex:
    def test_term_frequencies(self):
        index = InvertedIndex()
        index.add_document(1, ["пушистый", "кот", "пушистый", "хвост"])

        postings = index.get_postings("пушистый")
        assert postings.get(1) == pytest.approx(0.5)
        assert index.get_postings("кот").get(1) == pytest.approx(0.25)

    def test_frequencies_sum_to_one(self):
        index = InvertedIndex()
        terms = ["a", "b", "a", "c", "a", "b", "d"]
        index.add_document(7, terms)

        total = sum(index.get_postings(term).get(7) for term in set(terms))
        assert total == pytest.approx(1.0)

    def test_empty_tokens_are_terms(self):
        index = InvertedIndex()
        index.add_document(0, ["cat", "", "dog"])
        assert "" in index
        assert index.get_postings("").get(0) == pytest.approx(1 / 3)

    def test_document_without_terms_adds_nothing(self):
        index = InvertedIndex()
        index.add_document(0, [])
        assert len(index) == 0

    def test_doc_freq(self):
        index = InvertedIndex()
        index.add_document(0, ["cat", "dog"])
        index.add_document(1, ["cat"])

        assert index.doc_freq("cat") == 2
        assert index.doc_freq("dog") == 1
        assert index.doc_freq("bird") == 0
        assert index.terms() == ["cat", "dog"]

    def test_unknown_term_has_no_postings(self):
        index = InvertedIndex()
        assert index.get_postings("cat") is None
        assert not index.document_contains("cat", 0)

    def test_document_contains(self):
        index = InvertedIndex()
        index.add_document(4, ["cat"])
        assert index.document_contains("cat", 4)
        assert not index.document_contains("cat", 5)

    def test_postings_iterate_by_doc_id(self):
        index = InvertedIndex()
        for doc_id in (9, 2, 5):
            index.add_document(doc_id, ["cat"])
        assert [doc_id for doc_id, _ in index.get_postings("cat")] == [2, 5, 9]


class TestComputeAverageRating:
    @pytest.mark.parametrize("ratings, expected", [
        ([2, 61, 42], 35),
        ([], 0),
        ([7, 2, 7], 5),
        ([1, 2], 1),
        ([-7, 2], -2),
        ([5, -12, 2, 1], -1),
        ([-3], -3),
    ])
    def test_truncates_toward_zero(self, ratings, expected):
        assert compute_average_rating(ratings) == expected


class TestDocumentStore:
    @pytest.fixture
    def store(self):
        store = DocumentStore()
        store.store(5, DocumentData(rating=5, status=DocumentStatus.ACTUAL))
        store.store(1, DocumentData(rating=1, status=DocumentStatus.BANNED))
        return store

    def test_get(self, store):
        assert store.get(1) == DocumentData(rating=1, status=DocumentStatus.BANNED)

    def test_get_missing(self, store):
        with pytest.raises(DocumentNotFoundError) as exc_info:
            store.get(3)
        assert str(exc_info.value) == "Document 3 not found"

    def test_count_and_membership(self, store):
        assert store.count() == 2
        assert len(store) == 2
        assert 5 in store
        assert store.exists(1)
        assert not store.exists(3)

    def test_insertion_order(self, store):
        assert list(store) == [5, 1]
        assert store.id_at(0) == 5
        assert store.id_at(1) == 1

    @pytest.mark.parametrize("index", [2, -1, 100])
    def test_id_at_out_of_range(self, store, index):
        with pytest.raises(OutOfRangeError):
            store.id_at(index)

    def test_status_values(self):
        assert [status.value for status in DocumentStatus] == [0, 1, 2, 3]
