class InvalidInput(ValueError):
    """Raised when the line width cannot hold at least one of the words on its own line."""

    def __init__(self, line_width: int):
        self.line_width = line_width
        super().__init__(f"Word is too long to fit line of width {line_width}")
