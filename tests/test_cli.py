"""End-to-end tests for the command line."""

from pathlib import Path

import pytest
import yaml

from kubehello.cli import main

SNAPSHOT = [
    {
        "apiVersion": "v1",
        "kind": "Pod",
        "metadata": {
            "name": "web-1",
            "namespace": "default",
            "creationTimestamp": "2024-01-02T03:04:05Z",
        },
        "spec": {"containers": [{"name": "web", "image": "nginx:1.25"}]},
    },
    {
        "apiVersion": "v1",
        "kind": "Pod",
        "metadata": {
            "name": "web-2",
            "namespace": "default",
            "creationTimestamp": "2024-03-04T05:06:07Z",
        },
    },
]


@pytest.fixture(autouse=True)
def isolated_kubeconfig(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Point the kubeconfig lookup at a file that does not exist."""
    monkeypatch.setenv("KUBECONFIG", str(tmp_path / "no-kubeconfig"))


@pytest.fixture
def snapshot(tmp_path: Path) -> str:
    """Fixture writing the snapshot store to disk."""
    path = tmp_path / "snapshot.yaml"
    path.write_text(yaml.safe_dump_all(SNAPSHOT))
    return str(path)


def test_hello_world(capsys: pytest.CaptureFixture[str]) -> None:
    """Verify the hello-world command."""
    assert main(["hello-world"]) == 0
    assert capsys.readouterr().out == "Hello World\n"


def test_file_input(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    """Verify the greeting and rendering of a manifest file."""
    pod = tmp_path / "pod.yaml"
    pod.write_text(yaml.safe_dump({"kind": "Pod", "metadata": {"name": "web-1"}}))

    assert main(["hello-kubernetes", "-f", str(pod), "-o", "name"]) == 0
    assert capsys.readouterr().out == "Hello Pod web-1 \npod/web-1\n"


def test_type_name_input(snapshot: str, capsys: pytest.CaptureFixture[str]) -> None:
    """Verify creation time and images for a type/name argument."""
    code = main(["hello-kubernetes", "pod/web-1", "--snapshot", snapshot, "-o", "name"])
    assert code == 0
    assert capsys.readouterr().out == (
        "Hello Pod web-1 2024-01-02 03:04:05 +0000 UTC nginx:1.25\npod/web-1\n"
    )


def test_bare_type(snapshot: str, capsys: pytest.CaptureFixture[str]) -> None:
    """Verify one greeting per matching object in store order."""
    assert main(["hello-kubernetes", "pod", "--snapshot", snapshot, "-o", "name"]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert lines == [
        "Hello Pod web-1 2024-01-02 03:04:05 +0000 UTC nginx:1.25",
        "pod/web-1",
        "Hello Pod web-2 2024-03-04 05:06:07 +0000 UTC",
        "pod/web-2",
    ]


def test_missing_object(snapshot: str, capsys: pytest.CaptureFixture[str]) -> None:
    """Verify a non-zero exit and no output for a token without matches."""
    assert main(["hello-kubernetes", "pod/missing", "--snapshot", snapshot]) == 1
    captured = capsys.readouterr()
    assert captured.out == ""
    assert captured.err.strip() == 'error: pod "missing" not found'


def test_partial_failure_keeps_output(
    snapshot: str, capsys: pytest.CaptureFixture[str]
) -> None:
    """Verify that later tokens are reported after an earlier failure."""
    code = main(
        [
            "hello-kubernetes",
            "pod/missing",
            "pod/web-2",
            "--snapshot",
            snapshot,
            "-o",
            "name",
        ]
    )
    assert code == 1
    captured = capsys.readouterr()
    assert "pod/web-2" in captured.out
    assert 'pod "missing" not found' in captured.err


def test_conflicting_input(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    """Verify that files and arguments together are rejected."""
    pod = tmp_path / "pod.yaml"
    pod.write_text("kind: Pod\nmetadata:\n  name: a\n")
    assert main(["hello-kubernetes", "pod/a", "-f", str(pod)]) == 1
    captured = capsys.readouterr()
    assert captured.out == ""
    assert "cannot provide both" in captured.err


def test_missing_input(capsys: pytest.CaptureFixture[str]) -> None:
    """Verify that an invocation without input is rejected."""
    assert main(["hello-kubernetes"]) == 1
    assert "must provide either" in capsys.readouterr().err


def test_unknown_output(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    """Verify that an unknown output format fails before printing."""
    pod = tmp_path / "pod.yaml"
    pod.write_text("kind: Pod\nmetadata:\n  name: a\n")
    assert main(["hello-kubernetes", "-f", str(pod), "-o", "wide"]) == 1
    assert "unable to match a printer" in capsys.readouterr().err


def test_config_sets_output(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    """Verify that the config file supplies the default output format."""
    pod = tmp_path / "pod.yaml"
    pod.write_text("kind: Pod\nmetadata:\n  name: a\n")
    config = tmp_path / "config.yml"
    config.write_text("output: name\n")
    assert main(["hello-kubernetes", "-f", str(pod), "--config", str(config)]) == 0
    assert capsys.readouterr().out == "Hello Pod a \npod/a\n"


def test_namespace_enforced_for_files(
    tmp_path: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    """Verify that -n rejects documents from another namespace."""
    pod = tmp_path / "pod.yaml"
    pod.write_text("kind: Pod\nmetadata:\n  name: a\n  namespace: prod\n")
    assert main(["hello-kubernetes", "-f", str(pod), "-n", "dev"]) == 1
    assert "does not match the namespace" in capsys.readouterr().err


def test_render_error_keeps_earlier_output(
    tmp_path: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    """Verify that a render failure stops the run without retracting output."""
    pods = tmp_path / "pods.yaml"
    pods.write_text(
        "kind: Pod\nmetadata:\n  name: a\n"
        "---\n"
        "kind: Pod\nmetadata:\n  name: b\ndata: !!binary aGVsbG8=\n"
        "---\n"
        "kind: Pod\nmetadata:\n  name: c\n"
    )
    assert main(["hello-kubernetes", "-f", str(pods), "-o", "json"]) == 1
    captured = capsys.readouterr()
    assert captured.out.startswith("Hello Pod a \n{")
    assert "Hello Pod b" not in captured.out
    assert "Hello Pod c" not in captured.out
    assert "unable to print object as json" in captured.err
