class BasePeerIdError(Exception):
    pass


class ValidationError(BasePeerIdError):
    """Raised when something does not pass a validation check."""


class ParseError(BasePeerIdError):
    pass


class InvalidIdError(ValidationError):
    """Raised when the id handed to ``PeerId`` is not a well-formed multihash."""


class InconsistentArgumentsError(ValidationError):
    """
    Raised when the id, private key and public key handed to ``PeerId`` do
    not describe the same identity.
    """


class KeyMismatchError(ValidationError):
    """
    Raised while importing JSON or protobuf when a digest recomputed from the
    supplied key material disagrees with the supplied id or the other key.
    """


class InvalidKeyInputError(ValidationError):
    """Raised when key material is neither ``bytes`` nor base64 text."""


class UnusableMaterialError(ParseError):
    pass


class InvalidCIDError(ParseError):
    """Raised when a CID cannot be parsed or carries an unsupported multicodec."""


class ImmutableFieldError(BasePeerIdError, AttributeError):
    pass
