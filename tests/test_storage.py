import io
from pathlib import Path

import pytest

from canvas_backend.infra.storage import BlobStore, extension_of


def test_put_then_get_returns_identical_bytes(tmp_path: Path) -> None:
    store = BlobStore(root=tmp_path)

    file_id = store.put(io.BytesIO(bytes([1, 2, 3])), "photo.jpg")

    assert len(file_id) == 36
    ref = store.get(file_id)
    assert ref.read_bytes() == bytes([1, 2, 3])
    assert ref.path.name == f"{file_id}.jpg"
    assert ref.content_type == "image/jpeg"


@pytest.mark.parametrize(
    "name, ext",
    [
        ("photo.jpg", ".jpg"),
        ("archive.tar.gz", ".gz"),
        ("README", ""),
        (".bashrc", ".bashrc"),
        ("dir.v2/notes", ""),
        ("C:\\uploads\\scan.PDF", ".PDF"),
        ("", ""),
    ],
)
def test_extension_of(name: str, ext: str) -> None:
    assert extension_of(name) == ext


def test_put_without_extension_stores_bare_id(tmp_path: Path) -> None:
    store = BlobStore(root=tmp_path)

    file_id = store.put(b"data", "Makefile")

    assert (tmp_path / file_id).read_bytes() == b"data"
    assert store.get(file_id).content_type == "application/octet-stream"


def test_put_creates_missing_directory(tmp_path: Path) -> None:
    root = tmp_path / "nested" / "file"
    store = BlobStore(root=root)

    file_id = store.put(b"x", "a.txt")

    assert (root / f"{file_id}.txt").exists()


def test_get_resolves_entries_written_by_another_process(tmp_path: Path) -> None:
    (tmp_path / "0f8fad5b-d9cb-469f-a165-70867728950e.png").write_bytes(b"png")
    store = BlobStore(root=tmp_path)

    ref = store.get("0f8fad5b-d9cb-469f-a165-70867728950e")

    assert ref.read_bytes() == b"png"


def test_get_rescans_when_index_entry_is_stale(tmp_path: Path) -> None:
    store = BlobStore(root=tmp_path)
    file_id = store.put(b"old", "a.txt")
    (tmp_path / f"{file_id}.txt").rename(tmp_path / f"{file_id}.bin")

    assert store.get(file_id).path.name == f"{file_id}.bin"


def test_get_unknown_id_is_not_found(tmp_path: Path) -> None:
    store = BlobStore(root=tmp_path / "missing")

    with pytest.raises(KeyError):
        store.get("does-not-exist")


def test_get_does_not_match_truncated_or_unsafe_ids(tmp_path: Path) -> None:
    store = BlobStore(root=tmp_path)
    file_id = store.put(b"x", "a.txt")

    for bad in (file_id[:8], "", ".", "..", "../etc/passwd"):
        with pytest.raises(KeyError):
            store.get(bad)


def test_get_ignores_in_flight_temp_files(tmp_path: Path) -> None:
    store = BlobStore(root=tmp_path)
    (tmp_path / ".abc.txt.1234.tmp").write_bytes(b"partial")

    with pytest.raises(KeyError):
        store.get("abc")
