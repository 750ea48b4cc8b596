"""Tests for the response helpers"""
from minecraft_mcp.responses import (
    build_failure,
    build_not_found,
    build_success,
    error_message,
    format_position,
    response_text,
)


def test_build_success_wraps_text():
    result = build_success("Successfully jumped")

    assert len(result.content) == 1
    assert result.content[0].type == "text"
    assert result.content[0].text == "Successfully jumped"
    assert not result.isError
    assert result.meta is None


def test_build_failure_from_exception():
    result = build_failure(RuntimeError("path blocked"))

    assert result.isError is True
    assert response_text(result) == "Failed: path blocked"


def test_build_failure_from_string():
    result = build_failure("Unknown tool: fly")

    assert result.isError is True
    assert response_text(result) == "Failed: Unknown tool: fly"


def test_build_failure_exception_without_message_uses_class_name():
    assert error_message(TimeoutError()) == "TimeoutError"
    assert response_text(build_failure(TimeoutError())) == "Failed: TimeoutError"


def test_build_not_found_is_tagged_but_not_an_error():
    result = build_not_found("No stone found within 16 blocks")

    assert not result.isError
    assert result.meta == {"status": "not_found"}
    assert response_text(result) == "No stone found within 16 blocks"


def test_build_not_found_extra_meta():
    result = build_not_found("Unknown block type: foo", status="unknown_type", compatibility_data="1.21.4")

    assert result.meta == {"status": "unknown_type", "compatibility_data": "1.21.4"}


def test_format_position_keeps_literal_coordinates():
    assert format_position(10.0, 64, -3) == "(10, 64, -3)"
    assert format_position(0.5, 64.25, -3.75) == "(0.5, 64.25, -3.75)"
