"""Exception classes for the landing-page builder."""


class PageforgeError(Exception):
    """Base exception for pageforge errors."""

    pass


class ConfigurationError(PageforgeError):
    """Raised when code asks for something the element model does not support."""

    pass


class UnknownElementTypeError(ConfigurationError):
    """Raised when an element is created with a type outside the closed set."""

    def __init__(self, element_type: object):
        self.element_type = element_type
        super().__init__(f"Unknown element type: {element_type!r}")


class ElementNotFoundError(PageforgeError):
    """Raised when an element id is not part of the document."""

    pass


class DocumentValidationError(PageforgeError):
    """Raised for missing or invalid document fields (save is not attempted)."""

    pass


class GatewayError(PageforgeError):
    """Raised when the persistence collaborator fails (network/storage fault)."""

    pass
