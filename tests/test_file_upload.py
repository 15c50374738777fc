import io
import re

import pytest
from fastapi import UploadFile
from starlette.datastructures import Headers

from studybuddy.core.exceptions import ValidationError
from studybuddy.utils.file_upload import (
    delete_stored_file,
    generate_unique_filename,
    get_file_extension,
    is_allowed_file,
    save_upload_file,
)


def test_is_allowed_file():
    assert is_allowed_file("lecture.PDF")
    assert is_allowed_file("lecture.pdf", "application/pdf")
    assert not is_allowed_file("lecture.pdf", "image/png")
    assert not is_allowed_file("lecture.docx")
    assert not is_allowed_file("lecture")


def test_get_file_extension():
    assert get_file_extension("a.b.Pdf") == "pdf"
    assert get_file_extension("noext") == ""


def test_generate_unique_filename_keeps_readable_name():
    name = generate_unique_filename("../My Lecture  Notes.pdf")

    assert re.fullmatch(r"\d+-\d+-My_Lecture_Notes\.pdf", name)


def test_delete_stored_file(tmp_path):
    target = tmp_path / "x.pdf"
    target.write_bytes(b"%PDF")

    assert delete_stored_file(str(target)) is True
    assert not target.exists()
    assert delete_stored_file(str(target)) is False
    assert delete_stored_file("") is False


def make_upload(content, filename="lecture.pdf", content_type="application/pdf"):
    return UploadFile(
        file=io.BytesIO(content),
        filename=filename,
        headers=Headers({"content-type": content_type}),
    )


def test_save_upload_file_writes_to_upload_dir(tmp_path):
    file_path, filename, size = save_upload_file(make_upload(b"%PDF-1.4\n%EOF\n"), upload_dir=str(tmp_path))

    assert size == 14
    assert file_path == str(tmp_path / filename)
    assert filename.endswith("-lecture.pdf")
    assert (tmp_path / filename).read_bytes() == b"%PDF-1.4\n%EOF\n"


@pytest.mark.parametrize("upload, max_size", [
    (make_upload(b"%PDF", filename="notes.txt", content_type="text/plain"), None),
    (make_upload(b""), None),
    (make_upload(b"%PDF-1.4 too big"), 4),
])
def test_save_upload_file_rejects_bad_uploads(tmp_path, upload, max_size):
    with pytest.raises(ValidationError):
        save_upload_file(upload, upload_dir=str(tmp_path), max_size=max_size)

    assert list(tmp_path.iterdir()) == []
