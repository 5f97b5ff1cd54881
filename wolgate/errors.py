"""Exception hierarchy shared by the CLI and the HTTP endpoint."""


class WakeError(Exception):
    """Base class for wolgate errors."""


class MacAddressError(WakeError, ValueError):
    """A target is not a valid 6-octet hardware address."""


class PasswordError(WakeError, ValueError):
    """A SecureOn password is not 12 hex digits."""


class AddressError(WakeError, ValueError):
    """A local or remote address cannot be parsed or resolved."""


class ParameterError(WakeError, ValueError):
    """A query parameter was supplied more than once."""


class RouteError(WakeError):
    """The routing command failed or its output could not be read."""
