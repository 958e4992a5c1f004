from __future__ import annotations

import requests

from typing import List, Optional

from picsum.context import PicsumContext
from picsum.errors import (
    BadRequest,
    DeserializationError,
    InvalidParameter,
    NotFound,
    ServerError,
    TransportError,
    UnexpectedStatus,
)
from picsum.models.image import Image, ImageInfo, ImageRequest
from picsum import url_builder

class PicsumClient:
    """
    Thin binding for the picsum.photos API.

    Every call validates its parameters, builds one URL and issues a single
    GET through the session. Nothing is retried or cached; errors surface as
    the types in picsum.errors.
    """

    def __init__(
        self,
        context: Optional[PicsumContext] = None,
        session: Optional[requests.Session] = None,
        base_url: Optional[str] = None,
        timeout: Optional[float] = None,
    ):
        if context is None:
            context = PicsumContext()

        self.context = context

        self.base_url = (base_url or context.base_url).rstrip("/")
        self.timeout = timeout if timeout is not None else context.timeout

        # An injected session belongs to the caller and is never closed here.
        self.owns_session = session is None
        self.session = session if session is not None else requests.Session()

    def __enter__(self) -> PicsumClient:
        return self

    def __exit__(self, exc_type, exc_value, traceback):
        self.close()

    def close(self):
        if self.owns_session:
            self.session.close()

    def fetch_random(self, request: ImageRequest) -> bytes:
        path = url_builder.random_path(request)

        return self.__get_image(path, request).content

    def fetch_by_id(self, image_id: str, request: ImageRequest) -> bytes:
        path = url_builder.id_path(image_id, request)

        return self.__get_image(path, request).content

    def fetch_by_seed(self, seed: str, request: ImageRequest) -> bytes:
        path = url_builder.seed_path(seed, request)

        return self.__get_image(path, request).content

    def fetch(self, request: ImageRequest) -> bytes:
        path = url_builder.image_path(request)

        return self.__get_image(path, request).content

    def fetch_image(self, request: ImageRequest) -> Image:
        """
        Same as fetch(), but keeps the id picsum reports in the `picsum-id`
        header. Random and seeded images only learn their id this way.
        """

        path = url_builder.image_path(request)
        response = self.__get_image(path, request)

        return Image(
            id=response.headers.get("picsum-id"),
            data=response.content,
        )

    def fetch_info(self, image_id: str) -> ImageInfo:
        url = url_builder.build_url(self.base_url, url_builder.info_path(image_id))

        payload = self.__get_json(url)

        try:
            return ImageInfo.model_validate(payload)
        except ValueError as e:
            raise DeserializationError(f"Invalid image info from url={url}: {e}") from e

    def list_images(self, page: int = 1, limit: int = 30) -> List[ImageInfo]:
        if page <= 0 or limit <= 0:
            raise InvalidParameter(f"Page and limit must be positive: page={page}, limit={limit}")

        params = {
            "page": page,
            "limit": limit,
        }

        url = url_builder.build_url(self.base_url, url_builder.list_path(), params)

        payload = self.__get_json(url)

        if not isinstance(payload, list):
            raise DeserializationError(f"Expected a list of images from url={url}")

        try:
            return [ImageInfo.model_validate(item) for item in payload]
        except ValueError as e:
            raise DeserializationError(f"Invalid image list from url={url}: {e}") from e

    def __get_image(self, path: str, request: ImageRequest) -> requests.Response:
        url = url_builder.build_url(self.base_url, path, url_builder.query_params(request))

        return self.__get(url)

    def __get_json(self, url: str):
        response = self.__get(url)

        try:
            return response.json()
        except ValueError as e:
            raise DeserializationError(f"Malformed JSON from url={url}: {e}") from e

    def __get(self, url: str) -> requests.Response:
        self.context.logger.debug(f"GET url={url}")

        try:
            r = self.session.get(url, timeout=self.timeout)
        except requests.RequestException as e:
            self.context.logger.error(f"Request failed: url={url}, error={e}")

            raise TransportError(f"Request to {url} failed: {e}") from e

        self.__check_status(r, url)

        return r

    def __check_status(self, r: requests.Response, url: str):
        status_code = r.status_code

        if 200 <= status_code < 300:
            return

        self.context.logger.warning(f"Unexpected response: url={url}, status_code={status_code}")

        if status_code == 404:
            raise NotFound(status_code, url, f"Image not found: url={url}")
        elif status_code == 400:
            raise BadRequest(status_code, url)
        elif status_code >= 500:
            raise ServerError(status_code, url)
        else:
            raise UnexpectedStatus(status_code, url)
