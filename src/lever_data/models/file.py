"""File attachments sent with multipart requests."""

from dataclasses import dataclass
from typing import BinaryIO, Optional, Union


@dataclass
class FileUpload:
    """
    A file to upload.
    contents may be raw bytes or an open binary file object.
    mime_type falls back to a guess from the file extension when not set.
    """

    name: str
    contents: Union[bytes, BinaryIO]
    mime_type: Optional[str] = None
