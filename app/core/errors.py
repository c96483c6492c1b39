class InvalidInputError(ValueError):
    """Raised when a profile handed to the scoring engine is malformed.

    Missing survey answers are not malformed; a field that is absent from the
    object altogether, or holds a value of the wrong type or range, is.
    """

    def __init__(self, field: str, message: str):
        self.field = field
        super().__init__(f"{field}: {message}")
