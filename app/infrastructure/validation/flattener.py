"""Flattening of validation result trees into error leaves."""

from dataclasses import dataclass
from typing import Any, List, Mapping, Optional

from infrastructure.validation.exceptions import MalformedValidationTreeError
from infrastructure.validation.models import Many, Single, ValidationNode


@dataclass(frozen=True)
class ErrorLeaf:
    """One field-level failure, ready for formatting.

    Attributes:
        prefix: Name of the directly enclosing association, None at the root.
        field: Field name the error belongs to.
        template: Untranslated message template.
        bindings: Placeholder values for the template.
    """

    prefix: Optional[str]
    field: str
    template: str
    bindings: Mapping[str, Any]


def flatten(
    node: ValidationNode, enclosing_association: Optional[str] = None
) -> List[ErrorLeaf]:
    """Decompose a validation tree into leaves.

    The node's own field errors come first, labelled with
    ``enclosing_association``; then each association is flattened with its
    own name as the label. The label is replaced, not accumulated: a leaf
    two associations deep carries only the innermost association name.

    Args:
        node: Root of the (sub)tree to flatten.
        enclosing_association: Label for this node's own errors.

    Returns:
        Leaves in traversal order. Callers must not rely on this order.

    Raises:
        MalformedValidationTreeError: If an association entry is neither
            Single nor Many, or a template is not a string.
    """
    leaves: List[ErrorLeaf] = []

    for field_name, details in node.field_errors.items():
        for detail in details:
            if not isinstance(detail.template, str):
                raise MalformedValidationTreeError(
                    f"Error template for field '{field_name}' must be a string, "
                    f"got {type(detail.template).__name__}"
                )
            leaves.append(
                ErrorLeaf(
                    prefix=enclosing_association,
                    field=field_name,
                    template=detail.template,
                    bindings=detail.bindings or {},
                )
            )

    for name, entry in node.associations.items():
        match entry:
            case Single(node=child):
                leaves.extend(flatten(child, name))
            case Many(nodes=children):
                for child in children:
                    leaves.extend(flatten(child, name))
            case _:
                raise MalformedValidationTreeError(
                    f"Association '{name}' must be Single or Many, "
                    f"got {type(entry).__name__}"
                )

    return leaves
