"""Tests for failure body interpretation."""

from assembla_connector.api.error_body import ErrorBody, extract_error


class TestExtractError:
    """Tests for extract_error."""

    def test_error_property(self):
        """The API's error text is extracted exactly."""
        result = extract_error(b'{"error":"not found"}')

        assert result == ErrorBody(message="not found")
        assert result.parsed
        assert result.description == "not found"

    def test_not_json(self):
        """A non-JSON body yields a parse failure instead of raising."""
        result = extract_error(b"not json")

        assert result.message is None
        assert not result.parsed
        assert result.parse_error
        assert result.description == result.parse_error

    def test_empty_body(self):
        result = extract_error(b"")

        assert not result.parsed

    def test_missing_error_property(self):
        result = extract_error(b'{"message":"nope"}')

        assert not result.parsed
        assert "'error'" in result.parse_error

    def test_not_an_object(self):
        """A JSON string or list is not an error object."""
        assert not extract_error(b'"not json"').parsed
        assert not extract_error(b'["error"]').parsed

    def test_non_string_error(self):
        result = extract_error(b'{"error": {"code": 5}}')

        assert not result.parsed
        assert "dict" in result.parse_error

    def test_null_and_list_error(self):
        assert "NoneType" in extract_error(b'{"error": null}').parse_error
        assert "list" in extract_error(b'{"error": ["a"]}').parse_error

    def test_scalar_error(self):
        """Numeric and boolean error values are reported as text."""
        assert extract_error(b'{"error": 42}') == ErrorBody(message="42")
        assert extract_error(b'{"error": 1.5}').message == "1.5"
        assert extract_error(b'{"error": true}').message == "True"

    def test_deeply_nested_body(self):
        """Nesting beyond the decoder's recursion limit is a parse failure."""
        result = extract_error(b"[" * 100000 + b"]" * 100000)

        assert not result.parsed
        assert result.parse_error

    def test_invalid_utf8(self):
        assert not extract_error(b"\x80\x81").parsed

    def test_accepts_text(self):
        assert extract_error('{"error": "bad"}').message == "bad"
