import io

from cubcaster.errors import (
    ARG_MSG,
    EXT_MSG,
    USE_MSG,
    CubError,
    format_error,
    report_error,
)


def test_format_with_prefix_and_message():
    assert format_error("File", EXT_MSG) == "Error\ncub3D: File: Wrong file extension\n"


def test_format_without_prefix():
    assert format_error(None, ARG_MSG + USE_MSG) == (
        "Error\ncub3D: Wrong number of arguments (Usage: ./cub3D map_name.cub)\n"
    )


def test_format_with_nothing():
    assert format_error(None, None) == "Error\ncub3D\n"


def test_error_str_joins_parts():
    assert str(CubError("Map", "No player found")) == "Map: No player found"
    assert str(CubError(None, "Elements missing")) == "Elements missing"


def test_error_keeps_fields():
    err = CubError("RGB", "Incorrect format")
    assert err.prefix == "RGB"
    assert err.message == "Incorrect format"


def test_report_without_prefix():
    stream = io.StringIO()
    report_error(CubError(None, "Elements missing"), stream)
    assert stream.getvalue() == "Error\ncub3D: Elements missing\n"


def test_report_writes_formatted_text():
    stream = io.StringIO()
    err = CubError("File", "File is directory")
    report_error(err, stream)
    assert stream.getvalue() == format_error("File", "File is directory")
    assert stream.getvalue().startswith("Error\n")