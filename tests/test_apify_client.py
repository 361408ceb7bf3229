"""Tests for the Apify Facebook comment scraper client."""

from unittest.mock import Mock, patch

import pytest
import requests
from hatewatch.core.exceptions import InvalidPostUrlError, ScrapeError
from hatewatch.services.apify_client import ApifyService, is_valid_facebook_url

POST_URL = "https://www.facebook.com/somepage/posts/123456"


def api_response(status_code=200, items=None, text=""):
    response = Mock(status_code=status_code, text=text)
    response.json.return_value = items if items is not None else []
    return response


@pytest.mark.parametrize("url,expected", [
    (POST_URL, True),
    ("https://m.facebook.com/story.php?story_fbid=1", True),
    ("http://facebook.com/groups/abc/permalink/1", True),
    ("https://twitter.com/x/status/1", False),
    ("facebook.com/x", False),
    ("", False),
    (None, False),
])
def test_is_valid_facebook_url(url, expected):
    assert is_valid_facebook_url(url) is expected


class TestApifyService:
    """Scraping through the Apify actor endpoint."""

    def test_rejects_non_facebook_url(self):
        with pytest.raises(InvalidPostUrlError):
            ApifyService(token="abc").scrape_post("https://example.com/post")

    @patch("hatewatch.services.apify_client.requests.post")
    def test_no_token_uses_demo_data(self, mock_post):
        result = ApifyService(token="").scrape_post(POST_URL)
        assert result.is_demo
        assert len(result.comments) == 5
        assert result.comments[3].text.startswith("Dasar bodoh!")
        assert result.post.title == "Demo - Post Facebook"
        mock_post.assert_not_called()

    @patch("hatewatch.services.apify_client.requests.post")
    def test_maps_dataset_items(self, mock_post):
        mock_post.return_value = api_response(items=[
            {
                "id": "c1",
                "profileName": "Budi",
                "text": "Dasar bodoh",
                "date": "2024-05-01T10:00:00Z",
                "likesCount": "7",
                "commentsCount": 2,
                "postTitle": "P" * 150,
                "imageUrl": "https://example.com/a.jpg",
            },
            {"id": "c2", "author": "Sari", "text": "Setuju", "replyToCommentId": "c1"},
            {"text": None, "likesCount": "many"},
        ])

        result = ApifyService(token="abc").scrape_post(POST_URL, limit=25)

        assert not result.is_demo
        first, reply, broken = result.comments
        assert (first.id, first.author, first.likes, first.replies) == ("c1", "Budi", 7, 2)
        assert first.timestamp == "2024-05-01T10:00:00Z"
        assert first.attachments[0].url == "https://example.com/a.jpg"
        assert reply.author == "Sari"
        assert reply.parent_id == "c1"
        assert broken.id == "comment_2"
        assert broken.author == "User 3"
        assert broken.text == ""
        assert broken.likes == 0
        assert len(result.post.title) == 100
        assert result.post.content == "P" * 150

        args, kwargs = mock_post.call_args
        assert args[0].endswith("/apify~facebook-comments-scraper/run-sync-get-dataset-items")
        assert kwargs["params"] == {"token": "abc"}
        assert kwargs["json"]["resultsLimit"] == 25
        assert kwargs["json"]["startUrls"] == [{"url": POST_URL, "method": "GET"}]
        assert kwargs["json"]["includeNestedComments"] is False
        assert "timeout" in kwargs

    @patch("hatewatch.services.apify_client.requests.post")
    def test_limit_is_clamped(self, mock_post):
        mock_post.return_value = api_response(items=[{"id": "1", "text": "x"}])
        ApifyService(token="abc").scrape_post(POST_URL, limit=10000)
        assert mock_post.call_args[1]["json"]["resultsLimit"] == 500

    @patch("hatewatch.services.apify_client.requests.post")
    def test_empty_dataset_uses_demo_data(self, mock_post):
        mock_post.return_value = api_response(items=[])
        result = ApifyService(token="abc").scrape_post(POST_URL)
        assert result.is_demo
        assert len(result.comments) == 5

    @patch("hatewatch.services.apify_client.requests.post")
    def test_http_error_raises(self, mock_post):
        mock_post.return_value = api_response(status_code=403, text="invalid token")
        with pytest.raises(ScrapeError, match="403"):
            ApifyService(token="bad").scrape_post(POST_URL)

    @patch("hatewatch.services.apify_client.requests.post")
    def test_connection_error_raises(self, mock_post):
        mock_post.side_effect = requests.ConnectionError("unreachable")
        with pytest.raises(ScrapeError):
            ApifyService(token="abc").scrape_post(POST_URL)


if __name__ == "__main__":
    pytest.main([__file__])
