"""Exceptions raised by the LAN simulator."""


class PreconditionError(ValueError):
    """Raised when an operation is invoked on a network that cannot serve it.

    Covers uninitialized or inconsistent networks and unregistered
    workstations. These are caller errors: the failing call is aborted but
    the network itself is left untouched.
    """
