class FSMSegmentError(TypeError):
    """Raised when a path segment is neither a literal path string nor a pattern."""
    def __init__(self, index: int, segment: object, reason: str | None = None) -> None:
        self.index = index
        self.segment = segment
        super().__init__(
            f"Invalid path segment at index {index}: {segment!r}. "
            + (reason or "Expected str, os.PathLike or re.Pattern.")
        )


class FSMPatternError(TypeError):
    """Raised when a value cannot be used as a name pattern."""
    def __init__(self, pattern: object) -> None:
        self.pattern = pattern
        super().__init__(
            f"Invalid pattern: {pattern!r}. Expected re.Pattern or a regex string."
        )
