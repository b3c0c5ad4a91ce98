"""Tests for the command line driver."""

import io
import logging

from searchserver_core import DocumentStatus, SearchServer
from searchserver_core.cli import (
    add_document,
    format_match_result,
    main,
    read_line,
    run_demo,
    run_search,
)


def test_format_match_result():
    line = format_match_result(1, ["пушистый", "пёс"], DocumentStatus.BANNED)
    assert line == "{ document_id = 1, status = 2, words = пушистый пёс}"


def test_format_match_result_without_words():
    assert format_match_result(4, [], DocumentStatus.ACTUAL) == "{ document_id = 4, status = 0, words =}"


def test_demo_output():
    out = io.StringIO()
    assert run_demo(out) == 0
    lines = out.getvalue().splitlines()

    assert any(line.startswith("Error adding document -1") for line in lines)
    assert any(line.startswith("Error adding document 3") for line in lines)
    assert "{ document_id = 5, relevance = 0.202733, rating = 5 }" in lines
    assert "{ document_id = 1, status = 0, words = пушистый пёс}" in lines
    assert "{ document_id = 4, status = 0, words = пёс}" in lines
    assert sum(line.startswith("Search error") for line in lines) == 2
    assert sum(line.startswith("Error matching documents") for line in lines) == 2
    assert lines[-1] == "Document index 3 out of range [0, 3)"


def test_search_from_stream():
    stream = io.StringIO(
        "и в на\n"
        "3\n"
        "белый кот и модный ошейник\n"
        "пушистый кот пушистый хвост\n"
        "ухоженный пёс выразительные глаза\n"
        "пушистый ухоженный кот\n"
    )
    out = io.StringIO()

    assert run_search(stream, out) == 0
    assert out.getvalue().splitlines() == [
        "{ document_id = 1, relevance = 0.650672, rating = 0 }",
        "{ document_id = 2, relevance = 0.274653, rating = 0 }",
        "{ document_id = 0, relevance = 0.101366, rating = 0 }",
    ]


def test_search_reports_invalid_query():
    stream = io.StringIO("\n1\ncat\ncat --dog\n")
    out = io.StringIO()

    assert run_search(stream, out) == 1
    assert out.getvalue().startswith("Error: ")


def test_main_demo(capsys):
    assert main(["demo"]) == 0
    assert "Search results for query: пушистый -пёс" in capsys.readouterr().out


def test_search_accepts_crlf_input():
    stream = io.StringIO("и в на\r\n2\r\nбелый кот\r\nпушистый пёс\r\nкот\r\n")
    out = io.StringIO()

    assert run_search(stream, out) == 0
    assert out.getvalue().splitlines() == ["{ document_id = 0, relevance = 0.346574, rating = 0 }"]


def test_read_line_strips_line_endings():
    stream = io.StringIO("cat dog\r\nfox\n")
    assert read_line(stream) == "cat dog"
    assert read_line(stream) == "fox"


def test_rejected_document_logged_with_details(caplog):
    server = SearchServer()
    out = io.StringIO()

    with caplog.at_level(logging.WARNING, logger="searchserver_core.cli"):
        add_document(server, -1, "cat", DocumentStatus.ACTUAL, [], out)

    assert "'error_type': 'InvalidArgumentError'" in caplog.text
    assert "'doc_id': -1" in caplog.text
    assert out.getvalue().startswith("Error adding document -1")
