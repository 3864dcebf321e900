"""Locate GraphQL documents inside source files.

`.graphql`/`.gql` files are one document. Script and component files
(`.ts`, `.vue`, ...) hold documents in gql`...` or graphql(`...`) template
literals; each literal becomes a document whose offset points into the host
file so reported positions and fixes line up with the original text.
"""

from __future__ import annotations

import re
from dataclasses import dataclass

from gqlnaming.config import EMBEDDED_SUFFIXES, GRAPHQL_SUFFIXES

_TEMPLATE_LITERAL = re.compile(r"\b(?:gql|graphql)\s*(?:\(\s*)?`((?:[^`\\]|\\.)*)`", re.DOTALL)
_INTERPOLATION = re.compile(r"\$\{[^}]*\}")


@dataclass(frozen=True)
class EmbeddedDocument:
    offset: int
    body: str


def _blank(match: re.Match[str]) -> str:
    return " " * len(match.group(0))


def extract_documents(text: str, suffix: str) -> list[EmbeddedDocument]:
    """Return the GraphQL documents in *text* for a file with *suffix*."""
    if suffix in GRAPHQL_SUFFIXES:
        return [EmbeddedDocument(offset=0, body=text)]
    if suffix not in EMBEDDED_SUFFIXES:
        return []

    documents: list[EmbeddedDocument] = []
    for match in _TEMPLATE_LITERAL.finditer(text):
        # Interpolated fragments are blanked so offsets stay aligned
        body = _INTERPOLATION.sub(_blank, match.group(1))
        if body.strip():
            documents.append(EmbeddedDocument(offset=match.start(1), body=body))
    return documents
