"""Validation result trees and their rendering into error strings.

Main components:
- models: ValidationNode, ErrorDetail, Single/Many, Message/Tree
- flattener: flatten() into ErrorLeaf records
- formatter: format_message() and format_leaf()
- exceptions: MalformedValidationTreeError
"""

from infrastructure.validation.exceptions import (
    MalformedValidationTreeError,
    ValidationFormatError,
)
from infrastructure.validation.flattener import ErrorLeaf, flatten
from infrastructure.validation.formatter import (
    format_error_leaf,
    format_leaf,
    format_message,
)
from infrastructure.validation.models import (
    AssociationEntry,
    ErrorDetail,
    Many,
    Message,
    RawError,
    Single,
    Tree,
    ValidationNode,
)

__all__ = [
    "ValidationNode",
    "ErrorDetail",
    "Single",
    "Many",
    "AssociationEntry",
    "Message",
    "Tree",
    "RawError",
    "ErrorLeaf",
    "flatten",
    "format_message",
    "format_leaf",
    "format_error_leaf",
    "ValidationFormatError",
    "MalformedValidationTreeError",
]
