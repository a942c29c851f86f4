class ContentError(Exception):
    """Raised when layout or page content cannot be tokenized or rendered."""


class UnknownTagError(ContentError):
    def __init__(self, tag_class: str):
        self.tag_class = tag_class
        super().__init__(f"Unrecognized tag: {tag_class}")
