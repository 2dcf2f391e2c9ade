import fwfline


def test_public_exports():
    assert fwfline.__version__
    c = fwfline.FixedWidthLineCodec.from_properties({"field.lengths": "2,2", "columns": "a,b"})
    assert c.decode("xxyy") == ["xx", "yy"]
    assert issubclass(fwfline.TruncatedInputError, fwfline.CodecError)
    assert issubclass(fwfline.ConfigError, ValueError)
    assert issubclass(fwfline.FieldCountMismatchError, ValueError)
