from enum import Enum


class ErrorKind(Enum):
    """
    The closed set of recoverable failures a registry invocation can
    return. Every RegistryError subclass carries exactly one of these.
    """
    NOT_OWNER = 'not_owner'
    NOT_OWNED_TOKEN = 'not_owned_token'
    ALREADY_MINTED = 'already_minted'
    NOT_FOUND = 'not_found'
    REGISTRY_EXISTS = 'registry_exists'
    REGISTRY_NOT_FOUND = 'registry_not_found'


class RegistryError(Exception):
    """
    The base exception for the registry. The fmt directive
    will be overloaded by the inheriting classes

    :ivar msg: The message associated with the error
    :ivar kind: The ErrorKind of the failure
    """
    fmt = 'An unspecified error occurred'
    kind = None

    def __init__(self, **kwargs):
        msg = self.fmt.format(**kwargs)
        Exception.__init__(self, msg)
        self.kwargs = kwargs

    def __eq__(self, other):
        return type(self) is type(other) and self.kwargs == other.kwargs

    def __hash__(self):
        return hash((type(self), tuple(sorted(self.kwargs.items()))))


class NotOwner(RegistryError):
    """
    An admin-only operation was invoked by someone other than the admin

    :ivar caller: The identity that made the call
    """
    fmt = "Caller '{caller}' is not the registry admin"
    kind = ErrorKind.NOT_OWNER


class NotOwnedToken(RegistryError):
    """
    A transfer referenced a token that has never been minted, that is owned
    by someone other than the stated sender, or was invoked by someone other
    than the sender.

    :ivar token_id: The token referenced
    :ivar caller: The identity that made the call
    """
    fmt = "Token '{token_id}' is not owned by caller '{caller}'"
    kind = ErrorKind.NOT_OWNED_TOKEN


class AlreadyMinted(RegistryError):
    """
    :ivar token_id: The token id that already has an owner
    """
    fmt = "Token '{token_id}' has already been minted"
    kind = ErrorKind.ALREADY_MINTED


class NotFound(RegistryError):
    """
    A read referenced a key that has never been written

    :ivar variable: The state variable that was read
    :ivar key: The missing key
    """
    fmt = "No entry for '{key}' in '{variable}'"
    kind = ErrorKind.NOT_FOUND


class RegistryExists(RegistryError):
    """
    When attempting to construct a registry, found that it
    already exists in the database

    :ivar name: The name of the registry
    """
    fmt = "Registry with name '{name}' already exists in the database"
    kind = ErrorKind.REGISTRY_EXISTS


class RegistryNotFound(RegistryError):
    """
    :ivar name: The name the invocation was addressed to
    """
    fmt = "Registry with name '{name}' is not installed"
    kind = ErrorKind.REGISTRY_NOT_FOUND
