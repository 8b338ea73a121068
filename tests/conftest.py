import io

import pytest

from protobuf_codegen import CodeWriter


@pytest.fixture
def out():
    return io.StringIO()


@pytest.fixture
def writer(out):
    return CodeWriter(out)
