"""Validation result models.

A validation result is a finite tree: each ValidationNode holds the field
errors of one record plus the nodes of its associated records, tagged as
``Single`` (has-one) or ``Many`` (has-many).
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Mapping, Tuple, Union


@dataclass(frozen=True)
class ErrorDetail:
    """One validation failure on one field.

    Attributes:
        template: Message template with ``%{name}`` placeholders.
        bindings: Placeholder name -> primitive value.
    """

    template: str
    bindings: Mapping[str, Any] = field(default_factory=dict)


@dataclass
class ValidationNode:
    """Validation result for one record and its associations.

    Attributes:
        field_errors: Field name -> ordered list of ErrorDetail.
        associations: Association name -> Single or Many entry.
    """

    field_errors: Dict[str, List[ErrorDetail]] = field(default_factory=dict)
    associations: Dict[str, "AssociationEntry"] = field(default_factory=dict)

    @property
    def is_valid(self) -> bool:
        """True if this node and every nested node carry no field errors."""
        if any(self.field_errors.values()):
            return False
        return all(child.is_valid for child in self.children())

    def children(self) -> List["ValidationNode"]:
        """Nested nodes in association order."""
        nodes: List[ValidationNode] = []
        for entry in self.associations.values():
            if isinstance(entry, Single):
                nodes.append(entry.node)
            elif isinstance(entry, Many):
                nodes.extend(entry.nodes)
        return nodes

    def error_count(self) -> int:
        """Total number of ErrorDetail instances reachable from this node."""
        own = sum(len(details) for details in self.field_errors.values())
        return own + sum(child.error_count() for child in self.children())

    def add_error(
        self, field_name: str, template: str, **bindings: Any
    ) -> "ValidationNode":
        """Append an error to ``field_name`` and return the node for chaining.

        Example:
            >>> node = ValidationNode().add_error("username", "can't be blank")
        """
        self.field_errors.setdefault(field_name, []).append(
            ErrorDetail(template=template, bindings=bindings)
        )
        return self

    def put_single(self, name: str, node: "ValidationNode") -> "ValidationNode":
        """Attach a has-one association result."""
        self.associations[name] = Single(node)
        return self

    def put_many(self, name: str, nodes: List["ValidationNode"]) -> "ValidationNode":
        """Attach a has-many association result."""
        self.associations[name] = Many(tuple(nodes))
        return self


@dataclass(frozen=True)
class Single:
    """Has-one association entry."""

    node: ValidationNode


@dataclass(frozen=True)
class Many:
    """Has-many association entry; child order is kept."""

    nodes: Tuple[ValidationNode, ...] = ()


AssociationEntry = Union[Single, Many]


@dataclass(frozen=True)
class Message:
    """Free-standing error message, e.g. "Not logged in"."""

    text: str


@dataclass(frozen=True)
class Tree:
    """Error entry carrying a validation result tree."""

    node: ValidationNode


RawError = Union[Message, Tree]
