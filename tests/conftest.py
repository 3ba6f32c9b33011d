"""Shared pytest fixtures for all tests."""

import os

import pytest

TEXT_CONTENT = b'hello from fileinfo test'
TEXT_SIZE = 24


@pytest.fixture
def testdata(tmp_path, monkeypatch):
    """
    Create the testdata tree and make its parent the working directory.

    Layout:
        testdata/directory/text.txt   (24 bytes)
        testdata/empty_file.txt
        testdata/empty_dir/
        testdata/linked -> directory  (only where symlinks can be created)

    Args:
        tmp_path: pytest tmp_path fixture
        monkeypatch: pytest monkeypatch fixture

    Returns:
        Relative Path to the testdata directory
    """
    root = tmp_path / 'testdata'
    (root / 'directory').mkdir(parents=True)
    (root / 'directory' / 'text.txt').write_bytes(TEXT_CONTENT)
    (root / 'empty_file.txt').write_bytes(b'')
    (root / 'empty_dir').mkdir()

    try:
        os.symlink('directory', root / 'linked', target_is_directory=True)
    except (OSError, NotImplementedError):
        pass

    monkeypatch.chdir(tmp_path)
    return root.relative_to(tmp_path)


@pytest.fixture
def linked(testdata):
    """
    Relative path to the 'linked' symlink; skips when it could not be created.

    On Windows, creating symlinks requires special permissions.
    """
    link = testdata / 'linked'
    if not os.path.islink(link):
        pytest.skip('Skipping symlink test because symlink could not be created')
    return link
