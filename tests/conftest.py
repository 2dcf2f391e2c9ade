from __future__ import annotations
import pytest

from fwfline.codec.fixed_width import FixedWidthLineCodec


@pytest.fixture
def codec() -> FixedWidthLineCodec:
    return FixedWidthLineCodec([5, 10, 3], ["id", "name", "code"])


@pytest.fixture
def props() -> dict:
    return {"field.lengths": "5,10,3", "columns": "id,name,code"}
