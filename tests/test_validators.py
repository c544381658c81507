import asyncio
import io

import pytest
from fastapi import UploadFile

from practicals.core.errors import BadRequestError
from practicals.utils.validators import (
    check_upload,
    read_upload,
    unique_filename,
    validate_file_extension,
    validate_storage_filename,
)


def test_extension_check_is_case_insensitive():
    assert validate_file_extension("Photo.JPEG", [".jpeg"])
    assert not validate_file_extension("archive.tar.gz", [".tar"])
    assert not validate_file_extension(None, [".png"])


def test_storage_filename_must_be_single_component():
    assert validate_storage_filename("abc123.png")
    assert not validate_storage_filename("..")
    assert not validate_storage_filename("a/b.png")
    assert not validate_storage_filename("a\\b.png")
    assert not validate_storage_filename("")


def test_unique_filename_keeps_only_extension():
    name = unique_filename("../../My Holiday.PNG")

    assert name.endswith(".png")
    assert "/" not in name
    assert len(name) == 32 + 4
    assert unique_filename("x.png") != unique_filename("x.png")


@pytest.mark.parametrize("filename, size, code", [
    ("a.exe", 10, "UNSUPPORTED_FILE_TYPE"),
    ("a.png", 0, "EMPTY_FILE"),
    ("a.png", 101, "FILE_TOO_LARGE"),
])
def test_check_upload_errors(filename, size, code):
    with pytest.raises(BadRequestError) as exc_info:
        check_upload(filename, size, [".png"], 100)
    assert exc_info.value.code == code


def test_check_upload_accepts_valid_file():
    check_upload("a.png", 100, [".png"], 100)


def test_read_upload_stops_one_byte_past_the_limit():
    upload = UploadFile(file=io.BytesIO(b"x" * 1000), filename="big.txt")

    with pytest.raises(BadRequestError) as exc_info:
        asyncio.run(read_upload(upload, [".txt"], 10))

    assert exc_info.value.code == "FILE_TOO_LARGE"
    assert upload.file.tell() == 11


def test_read_upload_returns_content():
    upload = UploadFile(file=io.BytesIO(b"hello"), filename="note.txt")

    assert asyncio.run(read_upload(upload, [".txt"], 10)) == b"hello"
