"""
Tests for response decoding and status checking.
"""

import json

import pytest
from pydantic import ValidationError
from news_reader.decoder import check_response, decode_response
from news_reader.errors import ArticlesParsingFailed, BadRequest
from news_reader.models import Article, FetchResponse


class TestDecodeResponse:
    """Test decode_response."""

    def test_round_trip(self):
        """A response written in the wire shape decodes back to the same values."""
        original = FetchResponse(status="ok", articles=[Article(title="t", url="u")], error_code=None)
        wire = original.model_dump_json(by_alias=True)

        assert json.loads(wire) == {"status": "ok", "articles": [{"title": "t", "url": "u"}], "code": None}

        decoded = decode_response(wire)
        assert decoded.status == "ok"
        assert decoded.articles == original.articles
        assert decoded.error_code is None

    def test_extra_fields_ignored(self):
        body = json.dumps({
            "status": "ok",
            "totalResults": 2,
            "articles": [
                {"title": "A", "url": "http://a", "author": "me", "source": {"name": "S"}},
                {"title": "B", "url": "http://b", "urlToImage": None},
            ],
        })

        response = decode_response(body)

        assert [(a.title, a.url) for a in response.articles] == [("A", "http://a"), ("B", "http://b")]
        assert response.error_code is None

    def test_missing_articles_fails(self):
        """A successful status without articles is malformed, not an empty list."""
        with pytest.raises(ArticlesParsingFailed):
            decode_response('{"status": "ok", "code": null}')

    def test_error_body_without_articles(self):
        """NewsAPI error bodies carry no articles and still decode."""
        body = '{"status": "error", "code": "apiKeyDisabled", "message": "Your API key has been disabled."}'

        response = decode_response(body)

        assert response.status == "error"
        assert response.error_code == "apiKeyDisabled"
        assert response.articles == ()

    @pytest.mark.parametrize("body", [
        "not json",
        "",
        "[]",
        '{"articles": []}',
        '{"status": "ok", "articles": null}',
        '{"status": "ok", "articles": [{"title": "A"}]}',
        '{"status": "ok", "articles": [{"title": 1, "url": "http://x"}]}',
        '{"status": "ok", "articles": [], "code": 5}',
    ])
    def test_malformed_bodies(self, body):
        with pytest.raises(ArticlesParsingFailed):
            decode_response(body)

    def test_articles_are_immutable(self):
        response = decode_response('{"status": "ok", "articles": [{"title": "A", "url": "http://x"}]}')

        with pytest.raises(ValidationError):
            response.articles[0].title = "B"


class TestCheckResponse:
    """Test check_response status gating."""

    def test_ok_returned_unchanged(self):
        response = FetchResponse(status="ok", articles=[Article(title="A", url="http://x")])

        assert check_response(response) is response

    def test_ok_with_error_code_still_succeeds(self):
        """Status is authoritative, not the presence of a code."""
        response = decode_response('{"status": "ok", "articles": [], "code": "apiKeyDisabled"}')

        assert check_response(response) is response

    def test_error_status_raises_mapped_error(self):
        response = decode_response('{"status": "error", "code": "apiKeyDisabled"}')

        with pytest.raises(BadRequest) as exc_info:
            check_response(response)

        assert exc_info.value.reason == "Your API Key was disabled"

    def test_error_status_without_code(self):
        response = decode_response('{"status": "error", "articles": []}')

        with pytest.raises(BadRequest) as exc_info:
            check_response(response)

        assert exc_info.value.reason == "Unknown error"
