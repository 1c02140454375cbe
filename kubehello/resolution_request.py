"""The declarative, not-yet-executed description of what to resolve."""

from dataclasses import dataclass

from kubehello.input_mode import FilesInput, InputMode, TypeNameArgsInput
from kubehello.namespace_scope import NamespaceScope


@dataclass(frozen=True)
class ResolutionRequest:
    """Immutable resolution request owned by one command invocation."""

    input_mode: InputMode
    namespace: str
    enforce_namespace: bool = False
    all_namespaces: bool = False
    continue_on_error: bool = True
    flatten: bool = True

    def __post_init__(self) -> None:
        """Reject requests that name no input at all."""
        if isinstance(self.input_mode, FilesInput):
            if not self.input_mode.paths and not self.input_mode.kustomize:
                msg = "file input requires at least one path"
                raise ValueError(msg)
        elif isinstance(self.input_mode, TypeNameArgsInput):
            if not self.input_mode.tokens:
                msg = "type/name input requires at least one token"
                raise ValueError(msg)
        else:
            msg = f"unknown input mode: {self.input_mode!r}"
            raise TypeError(msg)

    @property
    def file_paths(self) -> tuple[str, ...]:
        """File references, empty in type/name mode."""
        if isinstance(self.input_mode, FilesInput):
            return self.input_mode.paths
        return ()

    @property
    def type_name_tokens(self) -> tuple[str, ...]:
        """Positional tokens, empty in file mode."""
        if isinstance(self.input_mode, TypeNameArgsInput):
            return self.input_mode.tokens
        return ()


def build_request(input_mode: InputMode, scope: NamespaceScope) -> ResolutionRequest:
    """Combine the classified input and the namespace scope into a request."""
    return ResolutionRequest(
        input_mode=input_mode,
        namespace=scope.namespace,
        enforce_namespace=scope.enforce_namespace,
        all_namespaces=scope.all_namespaces,
        continue_on_error=True,
        flatten=True,
    )
