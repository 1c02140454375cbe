"""Tests for input mode classification."""

import pytest

from kubehello.errors import ConflictingInputError, InputError, MissingInputError
from kubehello.filename_options import FilenameOptions
from kubehello.input_mode import FilesInput, TypeNameArgsInput, classify_input


def test_files_and_args_conflict() -> None:
    """Verify that file input and positional arguments are mutually exclusive."""
    options = FilenameOptions(filenames=("pod.yaml",))
    with pytest.raises(ConflictingInputError, match="cannot provide both"):
        classify_input(options, ["pod/web-1"])


def test_kustomize_counts_as_file_input() -> None:
    """Verify that a kustomize directory conflicts with positional arguments."""
    options = FilenameOptions(kustomize="overlays/prod")
    with pytest.raises(ConflictingInputError):
        classify_input(options, ["pod"])


def test_missing_input() -> None:
    """Verify that an invocation naming nothing is rejected."""
    with pytest.raises(MissingInputError, match="must provide either"):
        classify_input(FilenameOptions(), [])


def test_blank_filenames_are_empty() -> None:
    """Verify that whitespace-only file names do not count as input."""
    options = FilenameOptions(filenames=("", "  "))
    assert options.is_empty()
    with pytest.raises(MissingInputError):
        classify_input(options, [])


def test_files_mode() -> None:
    """Verify that file input keeps its paths and flags."""
    options = FilenameOptions(filenames=("a.yaml", "dir"), recursive=True)
    mode = classify_input(options, [])
    assert mode == FilesInput(paths=("a.yaml", "dir"), recursive=True)


def test_type_name_mode() -> None:
    """Verify that positional arguments select type/name mode in order."""
    mode = classify_input(FilenameOptions(), ["pod/a", "svc/b"])
    assert isinstance(mode, TypeNameArgsInput)
    assert mode.tokens == ("pod/a", "svc/b")


def test_filenames_and_kustomize_conflict() -> None:
    """Verify that -f and -k cannot be combined."""
    options = FilenameOptions(filenames=("pod.yaml",), kustomize="overlay")
    with pytest.raises(InputError, match="only one of -f or -k"):
        classify_input(options, [])


def test_kustomize_and_recursive_conflict() -> None:
    """Verify that -k cannot be combined with -R."""
    options = FilenameOptions(kustomize="overlay", recursive=True)
    with pytest.raises(InputError, match="can't be used with -f or -R"):
        classify_input(options, [])


def test_kustomize_mode() -> None:
    """Verify that a kustomize directory alone selects file mode."""
    mode = classify_input(FilenameOptions(kustomize="overlay"), [])
    assert mode == FilesInput(paths=(), kustomize="overlay")
