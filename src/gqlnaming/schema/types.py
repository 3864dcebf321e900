"""Resolve the return type name of an operation's first field.

The resolver talks to the schema through a narrow capability:

    schema.root_type(kind)      -> root type or None
    root.field(name)            -> field or None
    field.type                  -> type reference
    type_ref.of_type / .name    -> wrapped reference / terminal name

`GraphQLSchemaCapability` exposes a graphql-core schema this way.
"""

from __future__ import annotations

from typing import Any, Literal, Protocol

from graphql import GraphQLObjectType, GraphQLSchema

OperationKind = Literal["query", "mutation", "subscription"]


class FieldCapability(Protocol):
    @property
    def type(self) -> Any: ...


class RootTypeCapability(Protocol):
    def field(self, name: str) -> FieldCapability | None: ...


class TypeCapability(Protocol):
    def root_type(self, kind: OperationKind) -> RootTypeCapability | None: ...


def unwrap_type(type_ref: Any) -> Any:
    """Follow NonNull/List wrappers down to the named type."""
    current = type_ref
    while getattr(current, "of_type", None) is not None:
        current = current.of_type
    return current


def get_operation_type_name(
    schema: TypeCapability | None,
    kind: OperationKind,
    first_field_name: str,
) -> str | None:
    """Return the named type of *first_field_name* on the root type for *kind*.

    None when the schema, root type, field or terminal name is missing;
    callers skip validation in that case.
    """
    if schema is None:
        return None

    root = schema.root_type(kind)
    if root is None:
        return None

    field = root.field(first_field_name)
    if field is None or getattr(field, "type", None) is None:
        return None

    return getattr(unwrap_type(field.type), "name", None) or None


class _ObjectTypeView:
    def __init__(self, object_type: GraphQLObjectType) -> None:
        self._object_type = object_type

    def field(self, name: str) -> FieldCapability | None:
        return self._object_type.fields.get(name)


class GraphQLSchemaCapability:
    """Expose a graphql-core `GraphQLSchema` as a TypeCapability."""

    def __init__(self, schema: GraphQLSchema) -> None:
        self.schema = schema

    def root_type(self, kind: OperationKind) -> RootTypeCapability | None:
        if kind == "query":
            root = self.schema.query_type
        elif kind == "mutation":
            root = self.schema.mutation_type
        elif kind == "subscription":
            root = self.schema.subscription_type
        else:
            return None
        return _ObjectTypeView(root) if root is not None else None
