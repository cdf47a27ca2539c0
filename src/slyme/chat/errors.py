class RemoteCallFailed(Exception):
    """The generation call raised, timed out, or was rejected by the backend.

    The underlying exception is available as ``__cause__``.
    """
