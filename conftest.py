import nbtlib
import pytest
from nbtlib.tag import ByteArray


def _byte_array(values):
    # NBT bytes are signed
    return ByteArray([v - 256 if v > 127 else v for v in values])


@pytest.fixture
def byte_array():
    """ByteArray from unsigned byte values."""
    return _byte_array


@pytest.fixture
def save_nbt(tmp_path):
    """Write a root compound to tmp_path/<filename> and return the path."""

    def save(filename, root, *, gzipped=False, root_name=""):
        path = tmp_path / filename
        path.parent.mkdir(parents=True, exist_ok=True)
        nbtlib.File(root, root_name=root_name).save(path, gzipped=gzipped)
        return path

    return save
