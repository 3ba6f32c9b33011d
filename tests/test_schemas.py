"""Tests for the pydantic metadata schema."""

import os

from fileinfo.metadata import build_metadata
from fileinfo.schemas import FileMetadataResponse


def test_from_metadata_copies_fields(testdata):
    info = build_metadata(os.path.join('testdata', 'directory', 'text.txt'))

    response = FileMetadataResponse.from_metadata(info)

    assert response.name == 'text.txt'
    assert response.title == 'text'
    assert response.extension == '.txt'
    assert response.size == 24
    assert response.is_directory is False
    assert response.absolute_path == info.absolute_path
    assert response.last_write_time == info.last_write_time


def test_json_dump_uses_iso_timestamps(testdata):
    path = os.path.join('testdata', 'empty_file.txt')
    os.utime(path, ns=(1_600_000_000_000_000_000, 1_600_000_000_000_000_000))
    info = build_metadata(path)

    data = FileMetadataResponse.from_metadata(info).model_dump(mode='json')

    assert data['last_write_time'].startswith('2020-09-13T12:26:40')
    assert data['path'] == 'testdata'
    assert set(data) == {
        'name', 'path', 'absolute_path', 'title', 'extension', 'size',
        'is_directory', 'mode', 'creation_time', 'last_access_time', 'last_write_time',
    }


def test_round_trips_through_json(testdata):
    info = build_metadata(os.path.join('testdata', 'directory'))
    response = FileMetadataResponse.from_metadata(info)

    restored = FileMetadataResponse.model_validate_json(response.model_dump_json())

    assert restored == response
