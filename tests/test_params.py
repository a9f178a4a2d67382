import pytest

from antdb.params import ParamType, bind_params, coerce


@pytest.mark.parametrize(
    "value, hint, expected",
    [
        (5, None, "5"),
        ("5", ParamType.INT, 5),
        (0, ParamType.BOOL, False),
        ("anything", ParamType.NULL, None),
        ("abc", ParamType.LOB, b"abc"),
        (None, ParamType.STR, None),
    ],
)
def test_coerce(value, hint, expected):
    assert coerce(value, hint) == expected


def test_bind_params_without_types_passes_values_through():
    assert bind_params([1, None, b"x"]) == (1, None, b"x")


def test_bind_params_defaults_missing_hints_to_string():
    assert bind_params([1, 2], [ParamType.INT]) == (1, "2")


def test_bind_params_accepts_positional_mapping():
    assert bind_params(["7", 8], {0: ParamType.INT}) == (7, "8")


def test_bind_params_bad_value():
    with pytest.raises(ValueError):
        bind_params(["seven"], [ParamType.INT])


@pytest.mark.parametrize(
    "value, expected",
    [("0", False), ("false", False), ("", False), ("0.0", False), ("1", True), ("yes", True), ("2", True), (1, True)],
)
def test_coerce_bool_reads_strings(value, expected):
    assert coerce(value, ParamType.BOOL) is expected


def test_coerce_bool_rejects_unreadable_string():
    with pytest.raises(ValueError):
        coerce("maybe", ParamType.BOOL)


@pytest.mark.parametrize(
    "value, expected",
    [(5, b"5"), (b"\x00raw", b"\x00raw"), (bytearray(b"ab"), b"ab"), (memoryview(b"cd"), b"cd")],
)
def test_coerce_lob(value, expected):
    assert coerce(value, ParamType.LOB) == expected


def test_bind_params_none_means_no_params():
    assert bind_params(None) == ()
    assert bind_params(None, [ParamType.INT]) == ()
