"""Shared test fixtures for the spkmeta test suite.

The codec is pure, so there is nothing to set up beyond a descriptor
factory. The environment is pinned before any package import so a local
``.env`` cannot change encoder limits under the tests.
"""

import logging
import os

os.environ["SPKMETA_MAX_PAYLOAD_BYTES"] = "0"
os.environ["SPKMETA_LOG_FORMAT"] = "text"

import pytest

from spkmeta.schemas import FileDescriptor


@pytest.fixture()
def restore_logging():
    """Put the root logger back the way it was after a test reconfigures it."""
    root = logging.getLogger()
    handlers = list(root.handlers)
    level = root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)


def make_file(
    content_id: str = "QmTestCid",
    name: str = "file",
    ext: str = "txt",
    **overrides,
) -> FileDescriptor:
    """Factory for file descriptors."""
    payload = {
        "content_id": content_id,
        "name": name,
        "ext": ext,
    }
    payload.update(overrides)
    return FileDescriptor(**payload)
