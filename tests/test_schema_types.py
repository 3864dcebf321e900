"""Tests for operation type-name resolution."""

from __future__ import annotations

from types import SimpleNamespace

import pytest
from graphql import build_schema

from gqlnaming.schema.types import (
    GraphQLSchemaCapability,
    get_operation_type_name,
    unwrap_type,
)

SDL = """
type User { id: ID! name: String }
type Post { id: ID! }

type Query {
  user(id: ID!): User
  users: [User!]!
  post: Post
  count: Int
}

type Subscription {
  userUpdated: User!
}
"""


class _FakeRoot:
    def __init__(self, fields: dict) -> None:
        self.fields = fields

    def field(self, name: str):
        return self.fields.get(name)


class _FakeSchema:
    """Capability double mirroring the shape the resolver consumes."""

    def __init__(self, roots: dict) -> None:
        self.roots = roots

    def root_type(self, kind: str):
        return self.roots.get(kind)


def _field(type_ref) -> SimpleNamespace:
    return SimpleNamespace(type=type_ref)


@pytest.fixture()
def fake_schema() -> _FakeSchema:
    return _FakeSchema({
        "query": _FakeRoot({
            "user": _field(SimpleNamespace(name="User")),
            "users": _field(SimpleNamespace(of_type=SimpleNamespace(name="User"))),
            "broken": _field(None),
            "anonymous": _field(SimpleNamespace(name=None)),
        }),
    })


@pytest.fixture()
def graphql_schema() -> GraphQLSchemaCapability:
    return GraphQLSchemaCapability(build_schema(SDL))


class TestUnwrapType:
    def test_terminal_is_returned(self) -> None:
        ref = SimpleNamespace(name="User")
        assert unwrap_type(ref) is ref

    def test_nested_wrappers(self) -> None:
        terminal = SimpleNamespace(name="User")
        ref = SimpleNamespace(of_type=SimpleNamespace(of_type=SimpleNamespace(of_type=terminal)))
        assert unwrap_type(ref) is terminal

    def test_does_not_mutate(self) -> None:
        inner = SimpleNamespace(name="User")
        ref = SimpleNamespace(of_type=inner)
        unwrap_type(ref)
        assert ref.of_type is inner


class TestGetOperationTypeNameWithCapability:
    def test_direct_type(self, fake_schema) -> None:
        assert get_operation_type_name(fake_schema, "query", "user") == "User"

    def test_one_wrapping_layer(self, fake_schema) -> None:
        assert get_operation_type_name(fake_schema, "query", "users") == "User"

    def test_missing_root_type(self, fake_schema) -> None:
        assert get_operation_type_name(fake_schema, "mutation", "createUser") is None

    def test_missing_field(self, fake_schema) -> None:
        assert get_operation_type_name(fake_schema, "query", "nope") is None

    def test_field_without_type(self, fake_schema) -> None:
        assert get_operation_type_name(fake_schema, "query", "broken") is None

    def test_terminal_without_name(self, fake_schema) -> None:
        assert get_operation_type_name(fake_schema, "query", "anonymous") is None

    def test_no_schema(self) -> None:
        assert get_operation_type_name(None, "query", "user") is None


class TestGraphQLSchemaCapability:
    def test_nullable_field(self, graphql_schema) -> None:
        assert get_operation_type_name(graphql_schema, "query", "user") == "User"

    def test_non_null_list_of_non_null(self, graphql_schema) -> None:
        assert get_operation_type_name(graphql_schema, "query", "users") == "User"

    def test_scalar_field(self, graphql_schema) -> None:
        assert get_operation_type_name(graphql_schema, "query", "count") == "Int"

    def test_subscription(self, graphql_schema) -> None:
        assert get_operation_type_name(graphql_schema, "subscription", "userUpdated") == "User"

    def test_schema_without_mutation_type(self, graphql_schema) -> None:
        assert graphql_schema.root_type("mutation") is None
        assert get_operation_type_name(graphql_schema, "mutation", "createUser") is None

    def test_unknown_field(self, graphql_schema) -> None:
        assert get_operation_type_name(graphql_schema, "query", "orders") is None
