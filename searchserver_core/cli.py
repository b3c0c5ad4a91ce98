"""SearchServer Command Line - Example Driver and Console Search.

Usage:
    searchserver demo
    searchserver search < input.txt

The ``search`` command reads from stdin: a stop-word line, a line with
the document count, one line per document, then a query line.

Copyright (c) 2024-2026 BlackRoad OS, Inc. All rights reserved.
"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import List, Optional, Sequence, TextIO

from searchserver_core.engine import SearchServer
from searchserver_core.exceptions import SearchServerError
from searchserver_core.index.document import DocumentStatus

logger = logging.getLogger(__name__)


def read_line(stream: TextIO) -> str:
    """Read one line without its trailing newline."""
    return stream.readline().rstrip("\r\n")


def read_line_with_number(stream: TextIO) -> int:
    """Read one line holding an integer."""
    return int(read_line(stream).strip())


def format_match_result(document_id: int, words: Sequence[str], status: DocumentStatus) -> str:
    """Format a match result like ``{ document_id = 1, status = 0, words = a b}``."""
    return (
        f"{{ document_id = {document_id}, "
        f"status = {status.value}, "
        f"words ={''.join(' ' + word for word in words)}}}"
    )


def add_document(
    server: SearchServer,
    document_id: int,
    document: str,
    status: DocumentStatus,
    ratings: List[int],
    out: TextIO,
) -> None:
    """Add a document, reporting failures instead of raising."""
    try:
        server.add_document(document_id, document, status, ratings)
    except SearchServerError as e:
        logger.warning(f"Failed to add document {document_id}: {e.to_dict()}")
        print(f"Error adding document {document_id}: {e}", file=out)


def find_top_documents(server: SearchServer, raw_query: str, out: TextIO) -> None:
    """Print search results for a query."""
    print(f"Search results for query: {raw_query}", file=out)
    try:
        for document in server.find_top_documents(raw_query):
            print(document, file=out)
    except SearchServerError as e:
        logger.warning(f"Search failed for {raw_query!r}: {e.to_dict()}")
        print(f"Search error: {e}", file=out)


def match_documents(server: SearchServer, raw_query: str, out: TextIO) -> None:
    """Print match results of a query against every document."""
    try:
        print(f"Matching documents for query: {raw_query}", file=out)
        for index in range(server.get_document_count()):
            document_id = server.get_document_id(index)
            words, status = server.match_document(raw_query, document_id)
            print(format_match_result(document_id, words, status), file=out)
    except SearchServerError as e:
        logger.warning(f"Matching failed for {raw_query!r}: {e.to_dict()}")
        print(f"Error matching documents for query {raw_query}: {e}", file=out)


def run_demo(out: TextIO) -> int:
    """Run the example scenario."""
    server = SearchServer("и в на")

    add_document(server, 5, "пушистый кот пушистый хвост и", DocumentStatus.ACTUAL, [7, 2, 7], out)
    add_document(server, 1, "пушистый пёс и модный ошейник", DocumentStatus.ACTUAL, [1, 2], out)
    add_document(server, -1, "пушистый пёс и модный ошейник", DocumentStatus.ACTUAL, [1, 2], out)
    add_document(server, 3, "большой пёс скво\x12рец евгений", DocumentStatus.ACTUAL, [1, 3, 2], out)
    add_document(server, 4, "большой пёс скворец евгений", DocumentStatus.ACTUAL, [1, 1, 1], out)

    find_top_documents(server, "и в на", out)
    find_top_documents(server, "пушистый -пёс", out)
    find_top_documents(server, "пушистый --кот", out)
    find_top_documents(server, "пушистый -", out)

    match_documents(server, "пушистый пёс", out)
    match_documents(server, "модный -кот", out)
    match_documents(server, "модный --пёс", out)
    match_documents(server, "пушистый - хвост", out)

    try:
        server.get_document_id(server.get_document_count())
    except SearchServerError as e:
        print(e, file=out)

    return 0


def run_search(stream: TextIO, out: TextIO) -> int:
    """Index documents read from a stream and answer one query."""
    try:
        server = SearchServer(read_line(stream))
        document_count = read_line_with_number(stream)
        for document_id in range(document_count):
            server.add_document(document_id, read_line(stream), DocumentStatus.ACTUAL, [])
        raw_query = read_line(stream)

        for document in server.find_top_documents(raw_query):
            print(document, file=out)
    except (SearchServerError, ValueError) as e:
        logger.error(f"Search failed: {e}")
        print(f"Error: {e}", file=out)
        return 1
    return 0


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser."""
    parser = argparse.ArgumentParser(
        prog="searchserver",
        description="In-memory TF-IDF document search",
    )
    parser.add_argument("-v", "--verbose", action="store_true",
                        help="Enable debug logging")

    subparsers = parser.add_subparsers(dest="command", required=True)
    subparsers.add_parser("demo", help="Run the example scenario")
    subparsers.add_parser("search", help="Read stop words, documents and a query from stdin")
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Command line entry point."""
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    if args.command == "demo":
        return run_demo(sys.stdout)
    return run_search(sys.stdin, sys.stdout)


if __name__ == "__main__":
    sys.exit(main())
