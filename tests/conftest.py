"""Pytest fixtures for gqlcomplete tests."""

from __future__ import annotations

import os
import tempfile
from pathlib import Path

import pytest

_TEST_CONFIG_DIR = Path(tempfile.mkdtemp(prefix="gqlcomplete-test-config-"))
os.environ.setdefault("GQLCOMPLETE_CONFIG_DIR", str(_TEST_CONFIG_DIR))

from graphql import build_schema  # noqa: E402

from gqlcomplete.domains.query.completion import Cursor, get_autocomplete_suggestions  # noqa: E402

STAR_WARS_SDL = '''
directive @onField on FIELD
directive @onFragment on FRAGMENT_DEFINITION
directive @onQuery on QUERY
directive @cached(ttl: Int) on FIELD

"A character in the saga"
interface Character {
  id: ID!
  name: String
  friends: [Character]
}

"A humanoid creature"
type Human implements Character {
  id: ID!
  name: String
  friends: [Character]
  homePlanet: String
}

type Droid implements Character {
  id: ID!
  name: String
  friends: [Character]
  primaryFunction: String
}

union SearchResult = Human | Droid

enum Episode {
  "Released in 1977."
  NEWHOPE
  "Released in 1980."
  EMPIRE
  "Released in 1983."
  JEDI
}

input ReviewInput {
  stars: Int!
  commentary: String
  episode: Episode
}

type Review {
  stars: Int
  commentary: String
}

type Ordinals {
  first: String
  second: String
  fifth: String
}

type Query {
  "Hero of the saga"
  hero(episode: Episode, verbose: Boolean): Character
  heroes(episodes: [Episode]): [Character]
  human(id: ID!): Human
  droid(id: ID!): Droid
  search(text: String): [SearchResult]
  ordinals: Ordinals
  oldHero: Character @deprecated(reason: "Use hero")
}

type Mutation {
  createReview(episode: Episode, review: ReviewInput!): Review
}
'''


def end_of(query: str) -> Cursor:
    """Cursor placed after the last character of ``query``."""
    lines = query.split("\n")
    return Cursor(row=len(lines) - 1, column=len(lines[-1]))


@pytest.fixture
def schema():
    """Star Wars flavoured test schema."""
    return build_schema(STAR_WARS_SDL)


@pytest.fixture
def complete(schema):
    """Suggestions for a document, at the end unless a cursor is given."""

    def _complete(query: str, cursor: Cursor | None = None):
        return get_autocomplete_suggestions(schema, query, cursor or end_of(query))

    return _complete


@pytest.fixture
def suggest(complete):
    """Like ``complete`` but only the suggestion texts."""

    def _suggest(query: str, cursor: Cursor | None = None) -> list[str]:
        return [suggestion.text for suggestion in complete(query, cursor)]

    return _suggest
