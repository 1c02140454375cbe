"""Error types raised by the resolution and reporting pipeline."""


class HelloError(Exception):
    """Base class for all errors surfaced to the command layer."""


class InputError(HelloError):
    """The invocation did not name its input unambiguously."""


class ConflictingInputError(InputError):
    """Both file input and type/name arguments were supplied."""

    def __init__(self) -> None:
        """Build the error with the fixed user-facing message."""
        super().__init__(
            "cannot provide both arguments (type/name) and file input "
            "(--filename or -f)"
        )


class MissingInputError(InputError):
    """Neither file input nor type/name arguments were supplied."""

    def __init__(self) -> None:
        """Build the error with the fixed user-facing message."""
        super().__init__(
            "must provide either arguments (type/name) or file input "
            "(--filename or -f)"
        )


class ResolutionError(HelloError):
    """A single input item could not be resolved to an object."""

    def __init__(self, message: str, source: str = "") -> None:
        """Record the message and the file or token it came from."""
        super().__init__(message)
        self.source = source


class MetadataAccessError(ResolutionError):
    """A resolved object lacks the structural fields the pipeline reads."""


class RenderError(HelloError):
    """The configured printer could not serialize an object."""


class StoreError(HelloError):
    """The backing object store failed to answer a lookup."""


class ConfigError(HelloError):
    """A configuration or kubeconfig file could not be read."""
