"""Errors raised by the tree transforms."""


class TreeTransformError(Exception):
    """Base error for malformed input trees."""

    pass


class InvalidInputError(TreeTransformError):
    """Forward transform called on a node that is not the document root."""

    pass


class MalformedMarkError(TreeTransformError):
    """A mark node does not wrap exactly one child."""

    pass


class MalformedMediaError(TreeTransformError):
    """An audio or video node is missing its positional children."""

    pass
