"""File reference flags shared by commands that read manifests."""

from dataclasses import dataclass, field

from kubehello.errors import InputError


@dataclass(frozen=True)
class FilenameOptions:
    """Already-parsed -f/-R/-k flag values."""

    filenames: tuple[str, ...] = field(default_factory=tuple)
    recursive: bool = False
    kustomize: str = ""

    def has_filenames(self) -> bool:
        return any(f.strip() for f in self.filenames)

    def is_empty(self) -> bool:
        """Return True when no file reference of any kind was given."""
        return not self.has_filenames() and not self.kustomize

    def validate(self) -> None:
        """Reject flag combinations that name two kinds of file input."""
        if self.kustomize and self.has_filenames():
            msg = "only one of -f or -k can be specified"
            raise InputError(msg)
        if self.kustomize and self.recursive:
            msg = "the -k flag can't be used with -f or -R"
            raise InputError(msg)
