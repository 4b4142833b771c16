class ColorParseError(ValueError):
    """Raised when text matches none of the supported color notations.

    ``text`` holds the input exactly as the caller passed it.
    """

    def __init__(self, text: str):
        self.text = text
        super().__init__(f"Unsupported color format: {text}")
