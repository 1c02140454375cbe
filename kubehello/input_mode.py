"""Classification of the command's input into exactly one mode."""

from dataclasses import dataclass

from kubehello.errors import ConflictingInputError, MissingInputError
from kubehello.filename_options import FilenameOptions


@dataclass(frozen=True)
class FilesInput:
    """Objects come from manifest files, stdin, URLs or a kustomize overlay."""

    paths: tuple[str, ...]
    recursive: bool = False
    kustomize: str = ""


@dataclass(frozen=True)
class TypeNameArgsInput:
    """Objects come from positional type/name tokens."""

    tokens: tuple[str, ...]


InputMode = FilesInput | TypeNameArgsInput


def classify_input(options: FilenameOptions, args: list[str]) -> InputMode:
    """Decide whether the invocation supplies files or type/name arguments."""
    options.validate()
    has_files = not options.is_empty()
    if args and has_files:
        raise ConflictingInputError
    if not args and not has_files:
        raise MissingInputError
    if has_files:
        return FilesInput(
            paths=tuple(f for f in options.filenames if f.strip()),
            recursive=options.recursive,
            kustomize=options.kustomize,
        )
    return TypeNameArgsInput(tokens=tuple(args))
