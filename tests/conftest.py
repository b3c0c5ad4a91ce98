"""Shared fixtures for the search server test suite."""

import pytest

from searchserver_core import DocumentStatus, SearchServer


@pytest.fixture
def server():
    """Empty server without stop words."""
    return SearchServer()


@pytest.fixture
def animal_server():
    """Three documents indexed with stop words ``и в на``."""
    server = SearchServer("и в на")
    server.add_document(0, "белый кот и модный ошейник", DocumentStatus.ACTUAL, [8, -3])
    server.add_document(1, "пушистый кот пушистый хвост", DocumentStatus.ACTUAL, [7, 2, 7])
    server.add_document(2, "ухоженный пёс выразительные глаза", DocumentStatus.ACTUAL, [5, -12, 2, 1])
    return server


@pytest.fixture
def status_server():
    """Four identical documents, one per status."""
    server = SearchServer()
    server.add_document(0, "dog", DocumentStatus.ACTUAL, [0])
    server.add_document(1, "dog", DocumentStatus.IRRELEVANT, [0])
    server.add_document(2, "dog", DocumentStatus.REMOVED, [0])
    server.add_document(3, "dog", DocumentStatus.BANNED, [0])
    return server
