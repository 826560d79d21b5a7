"""multipart/form-data encoding for requests that upload files."""

import mimetypes
import secrets
from pathlib import PurePath
from typing import Any, Optional

from lever_data.models.file import FileUpload

OCTET_STREAM = "application/octet-stream"

Part = tuple[str, tuple[Optional[str], Any, Optional[str]]]


def guess_mime_type(filename: str) -> str:
    """MIME type from the file extension, or application/octet-stream."""
    mime_type, _ = mimetypes.guess_type(PurePath(filename).name)
    return mime_type or OCTET_STREAM


def empty_form() -> tuple[bytes, str]:
    """
    Body and Content-Type of a multipart/form-data message with no parts.
    httpx sends no multipart body at all when files is empty.
    """
    boundary = secrets.token_hex(16)
    return f"--{boundary}--\r\n".encode("ascii"), f"multipart/form-data; boundary={boundary}"


def form_field(name: str, value: Any) -> Part:
    """A plain form field part (no filename, no content type)."""
    return (name, (None, str(value), None))


def file_part(name: str, upload: FileUpload) -> Part:
    """A file part named name, carrying upload's filename and MIME type."""
    return (name, (upload.name, upload.contents, upload.mime_type or guess_mime_type(upload.name)))


class MultipartBuilder:
    """Collects form fields and files in order; unset values are skipped."""

    def __init__(self) -> None:
        self.parts: list[Part] = []

    def field(self, name: str, value: Any) -> "MultipartBuilder":
        if value is not None and value != "":
            self.parts.append(form_field(name, value))
        return self

    def fields(self, name: str, values: list[Any]) -> "MultipartBuilder":
        for value in values:
            self.field(name, value)
        return self

    def file(self, name: str, upload: Optional[FileUpload]) -> "MultipartBuilder":
        if upload is not None:
            self.parts.append(file_part(name, upload))
        return self
