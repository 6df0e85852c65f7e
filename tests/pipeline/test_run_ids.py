import pytest

from duckdps.errors import InvalidParameter
from duckdps.pipeline.run_ids import extract_run_id


@pytest.mark.parametrize("value, expected", [
    ("776482144628289536", "776482144628289536"),
    ("  123  ", "123"),
    ("https://fatduckdn.com/runs/776482144628289536", "776482144628289536"),
    ("https://fatduckdn.com/runs/776482144628289536/", "776482144628289536"),
    ("http://fatduckdn.com/runs/42?tab=dps", "42"),
])
def test_extract_run_id(value, expected):
    assert extract_run_id(value) == expected


@pytest.mark.parametrize("value", [
    "abc",
    "https://fatduckdn.com/runs/",
    "https://fatduckdn.com/runs/abc",
    "ftp://fatduckdn.com/runs/42",
])
def test_extract_run_id_rejects(value):
    with pytest.raises(InvalidParameter) as exc_info:
        extract_run_id(value)
    assert exc_info.value.field == "id"
    assert exc_info.value.status_code == 400
