"""Tests for the snapshot and kubectl object stores."""

import json
import subprocess
from pathlib import Path
from unittest.mock import MagicMock, patch

import pytest

from kubehello.errors import StoreError
from kubehello.kubectl_store import KubectlObjectStore
from kubehello.object_store import SnapshotObjectStore


def make_obj(kind: str, name: str, namespace: str | None = "default") -> dict:
    """Create a minimal object document."""
    meta: dict = {"name": name}
    if namespace:
        meta["namespace"] = namespace
    return {"apiVersion": "v1", "kind": kind, "metadata": meta}


@pytest.fixture
def store() -> SnapshotObjectStore:
    """Fixture providing a small snapshot across two namespaces."""
    return SnapshotObjectStore(
        [
            make_obj("Pod", "b"),
            make_obj("Pod", "a"),
            make_obj("Service", "a"),
            make_obj("Pod", "a", "other"),
            make_obj("Node", "node-1", None),
            {"kind": "Pod"},  # no name, skipped
        ]
    )


def test_list_keeps_snapshot_order(store: SnapshotObjectStore) -> None:
    """Verify enumeration order and namespace scoping."""
    names = [o["metadata"]["name"] for o in store.list("pods", "default")]
    assert names == ["b", "a"]


def test_list_all_namespaces(store: SnapshotObjectStore) -> None:
    """Verify that None scopes across every namespace."""
    assert len(store.list("po", None)) == 3


def test_get_by_alias(store: SnapshotObjectStore) -> None:
    """Verify that aliases match the right kind only."""
    found = store.get("svc", "a", "default")
    assert [o["kind"] for o in found] == ["Service"]
    assert store.get("pod", "missing", "default") == []


def test_cluster_scoped_kind_ignores_namespace(store: SnapshotObjectStore) -> None:
    """Verify that cluster-scoped objects are found from any namespace."""
    assert len(store.get("nodes", "node-1", "team-a")) == 1


def test_from_files(tmp_path: Path) -> None:
    """Verify that a snapshot loads and flattens manifest files."""
    f = tmp_path / "snap.json"
    f.write_text(
        json.dumps(
            {"kind": "List", "items": [make_obj("Pod", "x"), make_obj("Pod", "y")]}
        )
    )
    snap = SnapshotObjectStore.from_files([str(f)])
    assert [o["metadata"]["name"] for o in snap.list("pod", "default")] == ["x", "y"]


def test_kubectl_get_command() -> None:
    """Verify the kubectl invocation and parsing for a named object."""
    result = MagicMock(stdout=json.dumps(make_obj("Pod", "web-1", "team-a")))
    with patch("kubehello.kubectl_store.subprocess.run", return_value=result) as run:
        found = KubectlObjectStore().get("pod", "web-1", "team-a")
    assert run.call_args.args[0] == [
        "kubectl", "get", "pod", "web-1", "-o", "json", "-n", "team-a"
    ]
    assert found[0]["metadata"]["name"] == "web-1"


def test_kubectl_list_all_namespaces() -> None:
    """Verify that list output is flattened across all namespaces."""
    listing = {"kind": "List", "items": [make_obj("Pod", "a"), make_obj("Pod", "b")]}
    result = MagicMock(stdout=json.dumps(listing))
    store = KubectlObjectStore(binary="kc", kubeconfig="/tmp/kc")
    with patch("kubehello.kubectl_store.subprocess.run", return_value=result) as run:
        found = store.list("pods", None)
    cmd = run.call_args.args[0]
    assert cmd[0] == "kc"
    assert "--all-namespaces" in cmd
    assert cmd[-2:] == ["--kubeconfig", "/tmp/kc"]
    assert [o["metadata"]["name"] for o in found] == ["a", "b"]


def test_kubectl_get_across_namespaces_filters_list() -> None:
    """Verify that a named lookup across namespaces filters a listing."""
    listing = {"kind": "List", "items": [make_obj("Pod", "a"), make_obj("Pod", "b")]}
    result = MagicMock(stdout=json.dumps(listing))
    with patch("kubehello.kubectl_store.subprocess.run", return_value=result):
        found = KubectlObjectStore().get("pods", "b", None)
    assert [o["metadata"]["name"] for o in found] == ["b"]


def test_kubectl_not_found() -> None:
    """Verify that NotFound is an empty result, not an error."""
    err = subprocess.CalledProcessError(
        1, ["kubectl"], stderr='Error from server (NotFound): pods "x" not found'
    )
    with patch("kubehello.kubectl_store.subprocess.run", side_effect=err):
        assert KubectlObjectStore().get("pod", "x", "default") == []


def test_kubectl_failure() -> None:
    """Verify that other kubectl failures raise StoreError."""
    err = subprocess.CalledProcessError(1, ["kubectl"], stderr="connection refused")
    with patch("kubehello.kubectl_store.subprocess.run", side_effect=err):
        with pytest.raises(StoreError, match="connection refused"):
            KubectlObjectStore().list("pod", "default")


def test_kubectl_missing_binary() -> None:
    """Verify that a missing binary raises StoreError."""
    with patch(
        "kubehello.kubectl_store.subprocess.run", side_effect=FileNotFoundError("kc")
    ):
        with pytest.raises(StoreError, match="unable to run"):
            KubectlObjectStore(binary="kc").list("pod", "default")


def test_kubectl_missing_context() -> None:
    """Verify that a missing context is a store error, not zero matches."""
    err = subprocess.CalledProcessError(
        1, ["kubectl"], stderr='error: context "prod" not found'
    )
    with patch("kubehello.kubectl_store.subprocess.run", side_effect=err):
        with pytest.raises(StoreError, match='context "prod" not found'):
            KubectlObjectStore().get("pod", "a", "default")
