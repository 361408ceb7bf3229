"""Facebook comment collection through the Apify comments scraper."""

import logging
import re
from dataclasses import dataclass
from datetime import datetime, timedelta
from typing import Any, Dict, List, Optional

import requests

from ..core.config import settings
from ..core.constants import ErrorConstants, ScrapeConstants
from ..core.exceptions import InvalidPostUrlError, ScrapeError
from ..core.models import Comment, PostInfo

logger = logging.getLogger(__name__)

_FACEBOOK_URL = re.compile(ScrapeConstants.FACEBOOK_URL_PATTERN, re.IGNORECASE)


def is_valid_facebook_url(url: str) -> bool:
    return isinstance(url, str) and bool(_FACEBOOK_URL.match(url.strip()))


@dataclass
class ScrapeResult:
    comments: List[Comment]
    post: PostInfo
    is_demo: bool = False


class ApifyService:
    """Run the Apify Facebook comments actor synchronously and map its dataset."""

    def __init__(self, token: Optional[str] = None):
        self.token = token if token is not None else settings.apify_token
        self.base_url = ScrapeConstants.APIFY_BASE_URL
        self.actor = settings.apify_actor

    def scrape_post(self, url: str, limit: int = ScrapeConstants.DEFAULT_RESULTS_LIMIT) -> ScrapeResult:
        """Scrape comments of a Facebook post.

        Falls back to demo data when no token is configured or the dataset is
        empty. Raises InvalidPostUrlError for non-Facebook links and
        ScrapeError when the API call fails.
        """
        if not is_valid_facebook_url(url):
            raise InvalidPostUrlError(f"Not a Facebook post URL: {url}")

        if not self.token:
            logger.warning("No Apify token configured, using demo data")
            return self._get_demo_result("Data demo digunakan karena tidak ada API key.")

        limit = max(1, min(int(limit), ScrapeConstants.MAX_RESULTS_LIMIT))
        logger.info(f"Scraping up to {limit} comments from {url}...")

        payload = {
            "startUrls": [{"url": url.strip(), "method": "GET"}],
            "resultsLimit": limit,
            "includeNestedComments": settings.apify_include_nested,
        }
        endpoint = f"{self.base_url}/{self.actor}/run-sync-get-dataset-items"

        try:
            response = requests.post(
                endpoint,
                params={"token": self.token},
                json=payload,
                timeout=settings.apify_timeout,
            )
        except requests.RequestException as e:
            logger.error(f"Apify request error: {e}")
            raise ScrapeError(f"Apify request failed: {e}") from e

        if response.status_code not in (200, 201):
            body = (response.text or "")[:ErrorConstants.MAX_ERROR_BODY]
            logger.error(f"Apify scrape failed: {response.status_code}")
            raise ScrapeError(f"Apify API error {response.status_code}: {body}")

        try:
            items = response.json()
        except ValueError as e:
            raise ScrapeError(f"Apify returned invalid JSON: {e}") from e

        if not isinstance(items, list) or not items:
            logger.warning("Apify returned no comments, using demo data")
            return self._get_demo_result("Data demo digunakan karena tidak ada data dari API.")

        comments = [self._parse_item(item, i) for i, item in enumerate(items)]
        post = self._parse_post(items[0])
        logger.info(f"Retrieved {len(comments)} comments")
        return ScrapeResult(comments=comments, post=post)

    def _parse_item(self, item: Any, index: int) -> Comment:
        item = item if isinstance(item, dict) else {}
        attachments = item.get("attachments")
        if not attachments and item.get("imageUrl"):
            attachments = [{
                "type": "image",
                "url": item["imageUrl"],
                "description": item.get("imageDescription") or "Gambar komentar",
            }]
        return Comment.from_dict({
            "id": item.get("id"),
            "author": item.get("profileName") or item.get("author"),
            "text": item.get("text"),
            "timestamp": item.get("date") or item.get("timestamp") or datetime.now().isoformat(),
            "likes": item.get("likesCount"),
            "replies": item.get("commentsCount"),
            "parent_id": item.get("replyToCommentId") or item.get("parentId"),
            "attachments": attachments if isinstance(attachments, list) else None,
        }, index)

    def _parse_post(self, item: Dict[str, Any]) -> PostInfo:
        title = item.get("postTitle") if isinstance(item, dict) else None
        if not isinstance(title, str) or not title:
            return PostInfo(
                title="Facebook Post",
                content="",
                author="Facebook User",
                timestamp=datetime.now().isoformat(),
            )
        return PostInfo(
            title=title[:ScrapeConstants.MAX_POST_TITLE_LENGTH],
            content=title,
            author="Facebook Post Author",
            timestamp=str(item.get("date") or datetime.now().isoformat()),
        )

    def _get_demo_result(self, reason: str) -> ScrapeResult:
        now = datetime.now()
        demo = [
            ("John Doe", "Setuju banget dengan postingan ini! Sangat inspiratif.", 12, 2),
            ("Jane Smith", "Orang-orang seperti ini memang tidak berguna dan harus dienyahkan dari masyarakat.", 3, 8),
            ("Ahmad Rahman", "Terima kasih sudah berbagi informasi yang bermanfaat ini.", 25, 1),
            ("Maria Santos", "Dasar bodoh! Kenapa masih ada orang seperti ini di dunia. Menyebalkan sekali!", 1, 15),
            ("Budi Santoso", "Artikel yang menarik, saya akan share ke teman-teman.", 8, 0),
        ]
        comments = [
            Comment(
                id=str(i + 1),
                author=author,
                text=text,
                timestamp=(now - timedelta(hours=i + 1)).isoformat(),
                likes=likes,
                replies=replies,
            )
            for i, (author, text, likes, replies) in enumerate(demo)
        ]
        post = PostInfo(
            title="Demo - Post Facebook",
            content=reason,
            author="Demo User",
            timestamp=now.isoformat(),
            likes=150,
            shares=25,
        )
        return ScrapeResult(comments=comments, post=post, is_demo=True)
