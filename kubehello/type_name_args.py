"""Parsing of positional resource arguments."""

from dataclasses import dataclass

from kubehello.errors import InputError, ResolutionError


@dataclass(frozen=True)
class TypeNameRef:
    """One lookup derived from the positional arguments.

    ``name`` is None for a bare type, meaning every object of that type.
    A malformed token keeps its ``error`` so it can be reported in place.
    """

    resource_type: str
    name: str | None
    token: str
    error: ResolutionError | None = None


def parse_type_name_args(tokens: list[str] | tuple[str, ...]) -> list[TypeNameRef]:
    """Turn ``type/name``, ``type`` or ``type[,type] name...`` into lookups."""
    if not tokens:
        return []
    if any("/" in t for t in tokens):
        return [_parse_slash_token(t) for t in tokens]

    types = [t.strip() for t in tokens[0].split(",")]
    names = list(tokens[1:])
    refs: list[TypeNameRef] = []
    for resource_type in types:
        if not resource_type:
            err = ResolutionError(
                f"invalid resource type list {tokens[0]!r}", source=tokens[0]
            )
            refs.append(TypeNameRef("", None, tokens[0], err))
            continue
        if not names:
            refs.append(TypeNameRef(resource_type, None, resource_type))
            continue
        refs.extend(
            TypeNameRef(resource_type, name, f"{resource_type}/{name}")
            for name in names
        )
    return refs


def _parse_slash_token(token: str) -> TypeNameRef:
    if "/" not in token:
        msg = (
            "there is no need to specify a resource type as a separate argument "
            "when passing arguments in resource/name form "
            f"(e.g. 'kubectl-hello hello-kubernetes resource/<resource_name>' "
            f"instead of 'kubectl-hello hello-kubernetes resource "
            f"resource/<resource_name>'): {token!r}"
        )
        raise InputError(msg)
    resource_type, _, name = token.partition("/")
    if not resource_type or not name or "/" in name:
        err = ResolutionError(
            f"arguments in resource/name form must have a single resource and "
            f"name: {token!r}",
            source=token,
        )
        return TypeNameRef(resource_type, name or None, token, err)
    return TypeNameRef(resource_type, name, token)
