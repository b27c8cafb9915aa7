"""
xmlrpc-proxygen - Exception Hierarchy
Custom exceptions for granular error handling across the generator

These exceptions enable:
- Precise error catching at the top-level driver
- Structured debug logging with context
- One coherent diagnostic line per failed run
"""


# =============================================================================
# BASE EXCEPTIONS
# =============================================================================

class ProxyGenException(Exception):
    """Base exception for all xmlrpc-proxygen errors"""

    def __init__(self, message: str, context: dict = None):
        super().__init__(message)
        self.message = message
        self.context = context or {}

    def to_dict(self) -> dict:
        """Convert exception to structured log format"""
        return {
            "error_type": self.__class__.__name__,
            "message": self.message,
            "context": self.context
        }


# =============================================================================
# INTROSPECTION EXCEPTIONS
# =============================================================================

class IntrospectionException(ProxyGenException):
    """Base exception for failures while querying the server"""
    pass


class RemoteFaultError(IntrospectionException):
    """
    Raised for any transport or protocol level failure.

    Carries a numeric fault code and a description, whatever the underlying
    cause (server fault, HTTP error, refused connection, malformed response).
    """

    def __init__(self, code: int, description: str, method_name: str = None):
        super().__init__(
            f"XML-RPC fault #{code}: {description}",
            {"code": code, "description": description, "method": method_name}
        )
        self.code = code
        self.description = description
        self.method_name = method_name


class SignatureFormatError(IntrospectionException):
    """Raised when a signature reported by the server cannot be understood"""
    pass


# =============================================================================
# GENERATION EXCEPTIONS
# =============================================================================

class GenerationError(ProxyGenException):
    """Raised when the declaration or definition of a class cannot be rendered"""

    def __init__(self, class_name: str, stage: str, reason: str):
        super().__init__(
            f"Failed to generate {stage} for class {class_name}.  {reason}",
            {"class_name": class_name, "stage": stage, "reason": reason}
        )
        self.class_name = class_name
        self.stage = stage
