"""Uploaded file DTO, decoupled from the web framework's upload type."""

from dataclasses import dataclass


@dataclass(frozen=True, slots=True, kw_only=True)
class UploadedFile:
    """Fully read upload.

    Attributes:
        filename: Client supplied name (only its suffix is kept).
        content: File bytes.
        content_type: Declared MIME type.
    """

    filename: str
    content: bytes
    content_type: str | None = None
