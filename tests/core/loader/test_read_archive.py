# tests/core/loader/test_read_archive.py
"""Testes do leitor de tar gzip (read_archive)."""

import gzip
import io
import os
import tarfile

import pytest

from chartpack.core.errors import EmptyArchiveError, FormatError
from chartpack.core.loader.archive import Entry, read_archive
from tests._helpers import make_archive


def test_strips_wrapping_directory_and_keeps_order():
    data = make_archive(
        {
            "Chart.yaml": b"name: web\n",
            "templates/a.yaml": b"A",
            "values.yaml": b"x: 1\n",
        },
        top="web",
    )

    entries = read_archive(io.BytesIO(data))

    assert entries == [
        Entry(name="Chart.yaml", data=b"name: web\n"),
        Entry(name="templates/a.yaml", data=b"A"),
        Entry(name="values.yaml", data=b"x: 1\n"),
    ]


def test_wrapping_directory_name_is_not_inspected():
    data = make_archive({"Chart.yaml": b"name: web\n"}, top="anything-else")
    assert read_archive(io.BytesIO(data))[0].name == "Chart.yaml"


def test_directory_records_are_skipped():
    data = make_archive(
        {"templates/a.yaml": b"A"},
        top="web",
        dirs=["web", "web/templates"],
    )

    assert [e.name for e in read_archive(io.BytesIO(data))] == ["templates/a.yaml"]


def test_symlink_record_yields_empty_content():
    buf = io.BytesIO()
    with tarfile.open(fileobj=buf, mode="w:gz") as tar:
        link = tarfile.TarInfo(name="web/link.yaml")
        link.type = tarfile.SYMTYPE
        link.linkname = "Chart.yaml"
        tar.addfile(link)

    assert read_archive(io.BytesIO(buf.getvalue())) == [Entry(name="link.yaml", data=b"")]


def test_only_directories_raises_empty_archive():
    data = make_archive({}, dirs=["web", "web/templates"])

    with pytest.raises(EmptyArchiveError):
        read_archive(io.BytesIO(data))


def test_empty_archive_is_a_format_error():
    assert issubclass(EmptyArchiveError, FormatError)


def test_not_gzip_raises_format_error():
    with pytest.raises(FormatError):
        read_archive(io.BytesIO(b"plain bytes, not gzip"))


def test_gzip_but_not_tar_raises_format_error():
    with pytest.raises(FormatError):
        read_archive(io.BytesIO(gzip.compress(b"x" * 1024)))


def test_truncated_archive_raises_format_error():
    data = make_archive({"payload.bin": os.urandom(8192)}, top="web")

    with pytest.raises(FormatError):
        read_archive(io.BytesIO(data[: len(data) // 2]))


def test_record_without_wrapping_directory_raises_format_error():
    data = make_archive({"Chart.yaml": b"name: web\n"}, top=None)

    with pytest.raises(FormatError):
        read_archive(io.BytesIO(data))
