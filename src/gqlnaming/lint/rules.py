"""Naming rules for GraphQL fragments and operations.

Each rule checks that a definition's name follows {Prefix}{TypeName}, where
Prefix is derived from the file path and TypeName is:

- fragment:  the type condition (`fragment X on User` -> "User")
- operation: the return type of the first selected field of a query or
             subscription, resolved through the schema
- mutation:  same as operation, for mutations

    # File: features/users/components/UserCard.vue
    fragment UsersUserCardUser on User { id }   # ok
    fragment UserCard on User { id }            # reported
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field

from graphql import FragmentDefinitionNode, Node, OperationDefinitionNode

from gqlnaming.lint.models import Fix, NamingViolation
from gqlnaming.naming.names import generate_expected_name, is_valid_name
from gqlnaming.naming.paths import PathOptions, calculate_prefix_with_type_name
from gqlnaming.schema.types import TypeCapability, get_operation_type_name


@dataclass
class RuleContext:
    """Everything a rule needs to check one definition."""

    path: str
    text: str
    offset: int = 0
    schema: TypeCapability | None = None
    options: PathOptions = field(default_factory=PathOptions)
    severity: str = "error"

    def position(self, offset: int) -> tuple[int, int]:
        """1-based (line, column) of a character offset in the host file."""
        line = self.text.count("\n", 0, offset) + 1
        column = offset - (self.text.rfind("\n", 0, offset) + 1) + 1
        return line, column


@dataclass(frozen=True)
class Target:
    """A definition name under validation and the type it should be named after."""

    kind: str
    type_name: str


class NamingRule(ABC):
    """Base class for naming rules.

    Concrete rules define:
    - name / description
    - requires_schema: inactive when no schema is available
    - target(): the construct kind and type name, or None to skip the node
    """

    name: str
    description: str
    fixable: bool = True
    requires_schema: bool = False

    @abstractmethod
    def target(self, node: Node, context: RuleContext) -> Target | None:
        """Resolve what *node* should be named after, or None to skip it."""

    def check(self, node: Node, context: RuleContext) -> NamingViolation | None:
        name_node = getattr(node, "name", None)
        if name_node is None:
            return None

        target = self.target(node, context)
        if target is None:
            return None

        prefix = calculate_prefix_with_type_name(
            context.path, target.type_name, context.options,
        )
        actual_name = name_node.value
        if is_valid_name(actual_name, prefix, target.type_name):
            return None

        expected_name = generate_expected_name(prefix, target.type_name)
        fix = None
        line, column = 0, 0
        if name_node.loc is not None:
            start = context.offset + name_node.loc.start
            end = context.offset + name_node.loc.end
            fix = Fix(start=start, end=end, text=expected_name)
            line, column = context.position(start)

        return NamingViolation(
            file=context.path,
            line=line,
            column=column,
            rule=self.name,
            message=f'{target.kind} name must start with "{expected_name}"',
            severity=context.severity,
            expected_name=expected_name,
            actual_name=actual_name,
            fix=fix,
        )


class FragmentRule(NamingRule):
    name = "fragment"
    description = "Enforce naming convention for GraphQL Fragments based on file path."

    def target(self, node: Node, context: RuleContext) -> Target | None:
        if not isinstance(node, FragmentDefinitionNode) or node.type_condition is None:
            return None
        return Target(kind="Fragment", type_name=node.type_condition.name.value)


class _OperationRule(NamingRule):
    requires_schema = True
    operations: tuple[str, ...] = ()

    def target(self, node: Node, context: RuleContext) -> Target | None:
        if not isinstance(node, OperationDefinitionNode):
            return None

        operation = node.operation.value
        if operation not in self.operations:
            return None

        selections = node.selection_set.selections if node.selection_set else ()
        if not selections:
            return None

        # Fragment spreads carry a name too; it simply won't resolve to a field
        first_name = getattr(selections[0], "name", None)
        if first_name is None:
            return None

        type_name = get_operation_type_name(context.schema, operation, first_name.value)
        if not type_name:
            return None
        return Target(kind=operation.capitalize(), type_name=type_name)


class OperationRule(_OperationRule):
    name = "operation"
    description = (
        "Enforce naming convention for GraphQL Queries and Subscriptions based on file path."
    )
    operations = ("query", "subscription")


class MutationRule(_OperationRule):
    name = "mutation"
    description = "Enforce naming convention for GraphQL Mutations based on file path."
    operations = ("mutation",)


RULES: dict[str, NamingRule] = {
    rule.name: rule for rule in (FragmentRule(), OperationRule(), MutationRule())
}
