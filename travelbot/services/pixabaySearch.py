from typing import List, Optional

import requests
from pydantic import TypeAdapter

from ..settings.config import settings
from ..settings.logging import app_logger as logger

IMAGE_URLS = TypeAdapter(List[str])
# Responses never carry more than this many images, whatever MAX_IMAGE_RESULTS says
IMAGE_RESULT_CAP = 5


class ImageSearchService:
    def __init__(self, api_key: Optional[str], url: str, max_results: int = 5, timeout: float = 15):
        self.api_key = api_key
        self.url = url
        self.max_results = max(1, min(max_results, IMAGE_RESULT_CAP))
        self.timeout = timeout

    def search(self, term: str) -> List[str]:
        """Best effort: any failure is logged and yields an empty list."""
        if not self.api_key:
            logger.warning("PIXABAY_API_KEY is not set, skipping image search for %s", term)
            return []

        logger.info("Searching images for %s", term)
        try:
            response = requests.get(
                self.url,
                params={
                    "key": self.api_key,
                    "q": term,
                    "image_type": "photo",
                    "per_page": self.max_results,
                },
                timeout=self.timeout,
            )
            response.raise_for_status()
            hits = response.json()["hits"]
            # A hit without a string URL makes the whole payload unusable
            images = IMAGE_URLS.validate_python([hit["webformatURL"] for hit in hits])[: self.max_results]
        except (requests.RequestException, ValueError, KeyError, TypeError) as e:
            logger.error("Pixabay image search failed for %s: %s", term, e)
            return []

        logger.info("Found %d images for %s", len(images), term)
        return images


image_service = ImageSearchService(
    api_key=settings.PIXABAY_API_KEY,
    url=settings.PIXABAY_URL,
    max_results=settings.MAX_IMAGE_RESULTS,
    timeout=settings.HTTP_TIMEOUT,
)
