class MdtreeError(Exception):
    """Base exception for all mdtree errors."""

    def __init__(self, message: str):
        super().__init__(message)


class DocumentTooDeepError(MdtreeError):
    """Raised when a tree nests deeper than the serializer is allowed to recurse."""

    def __init__(self, max_depth: int, *, message: str | None = None):
        super().__init__(message or f"Document nesting exceeds the maximum render depth of {max_depth}")
        self.max_depth = max_depth


class UnsupportedNodeError(MdtreeError):
    """Raised in strict mode when Markdown contains a construct the document model cannot hold."""

    def __init__(self, node_type: str, *, message: str | None = None):
        super().__init__(message or f"Unsupported markdown node {node_type!r}")
        self.node_type = node_type
