"""Pydantic schemas for handing file metadata to JSON consumers."""

from datetime import datetime

from pydantic import BaseModel

from fileinfo.types import FileMetadata


class FileMetadataResponse(BaseModel):
    """Response model for file metadata."""
    name: str
    path: str
    absolute_path: str
    title: str
    extension: str
    size: int
    is_directory: bool
    mode: int
    creation_time: datetime
    last_access_time: datetime
    last_write_time: datetime

    @classmethod
    def from_metadata(cls, metadata: FileMetadata) -> 'FileMetadataResponse':
        """
        Build a response from a FileMetadata record.

        Args:
            metadata: Record to convert

        Returns:
            FileMetadataResponse with the same field values
        """
        return cls(
            name=metadata.name,
            path=metadata.path,
            absolute_path=metadata.absolute_path,
            title=metadata.title,
            extension=metadata.extension,
            size=metadata.size,
            is_directory=metadata.is_directory,
            mode=metadata.mode,
            creation_time=metadata.creation_time,
            last_access_time=metadata.last_access_time,
            last_write_time=metadata.last_write_time,
        )
