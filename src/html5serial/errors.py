"""Exceptions raised while serializing a tree."""


class SerializerError(Exception):
    """Base class for structural failures found during serialization."""


class MissingDocumentElementError(SerializerError):
    """A document was given that has no element child to serialize."""

    def __init__(self, document):
        self.document = document
        msg = f"{document!r} has no document element"
        super().__init__(msg)
