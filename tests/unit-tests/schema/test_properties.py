import pytest
from fwfline.errors import ConfigError
from fwfline.schema.properties import parse_column_names, parse_field_lengths, parse_properties


def test_parse_properties(props):
    assert parse_properties(props) == ([5, 10, 3], ["id", "name", "code"])


def test_parse_properties_ignores_unrelated_keys(props):
    props["serialization.format"] = "1"
    assert parse_properties(props) == ([5, 10, 3], ["id", "name", "code"])


def test_parse_field_lengths_trims_entries():
    assert parse_field_lengths(" 5 , 10,+3 ") == [5, 10, 3]


@pytest.mark.parametrize("value", [None, "", "   "])
def test_missing_field_lengths(value):
    with pytest.raises(ConfigError, match="requires the 'field.lengths' property"):
        parse_field_lengths(value)


@pytest.mark.parametrize("props", [
    {"columns": "a"},
    {"field.lengths": "", "columns": "a"},
    {"field.lengths": "  ", "columns": "a"},
])
def test_parse_properties_missing_field_lengths(props):
    with pytest.raises(ConfigError, match="requires the 'field.lengths' property"):
        parse_properties(props)


@pytest.mark.parametrize("value", ["5,x,3", "5,,3", "5,1.5", "5_0", "5,--1"])
def test_non_numeric_width(value):
    with pytest.raises(ConfigError, match="is not an integer"):
        parse_field_lengths(value)


@pytest.mark.parametrize("value", ["5,-1,3", "0", "3,0"])
def test_non_positive_width(value):
    with pytest.raises(ConfigError, match="must be positive"):
        parse_field_lengths(value)


def test_non_numeric_width_rejected_by_property_validation():
    with pytest.raises(ConfigError, match="Invalid codec properties"):
        parse_properties({"field.lengths": "5,x", "columns": "a,b"})


def test_non_string_property_rejected():
    with pytest.raises(ConfigError, match="Invalid codec properties"):
        parse_properties({"field.lengths": 5, "columns": "a"})


def test_missing_columns():
    with pytest.raises(ConfigError, match="'columns'"):
        parse_properties({"field.lengths": "5"})
    with pytest.raises(ConfigError, match="requires the 'columns' property"):
        parse_column_names(None)


def test_column_names_kept_verbatim():
    assert parse_column_names("id, name") == ["id", " name"]


def test_column_count_mismatch():
    with pytest.raises(ConfigError, match="declares 3 widths"):
        parse_properties({"field.lengths": "5,10,3", "columns": "a,b,c,d"})


def test_duplicate_column_names_rejected_by_codec():
    from fwfline.codec.fixed_width import FixedWidthLineCodec
    assert parse_properties({"field.lengths": "2,2", "columns": "a,a"}) == ([2, 2], ["a", "a"])
    with pytest.raises(ConfigError, match="Duplicate column name"):
        FixedWidthLineCodec.from_properties({"field.lengths": "2,2", "columns": "a,a"})


def test_parse_properties_reuses_module_validator(monkeypatch, props):
    def _fail(*args, **kwargs):
        raise AssertionError("validator rebuilt per call")
    monkeypatch.setattr("fwfline.schema.properties.PropertiesValidator", _fail)
    assert parse_properties(props) == ([5, 10, 3], ["id", "name", "code"])
    with pytest.raises(ConfigError, match="Invalid codec properties"):
        parse_properties({"field.lengths": "5,x", "columns": "a,b"})
