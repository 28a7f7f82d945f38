class DrivigoError(Exception):
    """Base class for errors raised by the service layer."""


class ValidationError(DrivigoError):
    """A required request field is missing."""


class ProviderError(DrivigoError):
    """The payment provider call failed or timed out."""


class DeliveryError(DrivigoError):
    """The SMTP relay did not accept the message."""


class VerificationMismatch(DrivigoError):
    """The supplied payment signature does not match the computed one."""
