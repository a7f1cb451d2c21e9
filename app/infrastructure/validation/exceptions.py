"""Exceptions for the validation error formatting system.

These signal contract violations by the producer of validation results.
Missing translations and missing placeholder bindings are not errors and
never raise.
"""


class ValidationFormatError(Exception):
    """Base exception for validation error formatting failures.

    Example:
        try:
            middleware.call(resolution)
        except ValidationFormatError as e:
            logger.error("validation_format_error", error=str(e))
    """

    pass


class MalformedValidationTreeError(ValidationFormatError, TypeError):
    """Raised when a validation tree or raw error has an unexpected shape.

    Example:
        >>> flatten(ValidationNode(associations={"posts": [ValidationNode()]}))
        Traceback (most recent call last):
        ...
        MalformedValidationTreeError: Association 'posts' must be Single or Many, got list
    """

    pass
