from typing import Optional
from urllib.parse import quote, urlencode

from picsum.errors import InvalidParameter
from picsum.models.image import ImageRequest

def _check_identifier(name: str, value) -> str:
    if value is None or not str(value).strip():
        raise InvalidParameter(f"{name} must not be empty.")

    return str(value)

def validate_request(request: ImageRequest):
    if request.width <= 0 or request.height <= 0:
        raise InvalidParameter(f"Width and height must be positive: width={request.width}, height={request.height}")

    if request.blur is not None and request.blur < 0:
        raise InvalidParameter(f"Blur must not be negative: blur={request.blur}")

    if request.id is not None:
        _check_identifier("Image id", request.id)

    if request.seed is not None:
        _check_identifier("Seed", request.seed)

def _segment(value: str) -> str:
    return quote(value, safe="")

def _finish_path(request: ImageRequest, prefix: str) -> str:
    path = f"{prefix}/{request.width}/{request.height}"

    if request.file_type:
        path += f".{request.file_type.value}"

    if request.grayscale:
        path = "/g" + path

    return path

def random_path(request: ImageRequest) -> str:
    validate_request(request)

    return _finish_path(request, "")

def id_path(image_id, request: ImageRequest) -> str:
    image_id = _check_identifier("Image id", image_id)

    validate_request(request)

    return _finish_path(request, f"/id/{_segment(image_id)}")

def seed_path(seed, request: ImageRequest) -> str:
    seed = _check_identifier("Seed", seed)

    validate_request(request)

    return _finish_path(request, f"/seed/{_segment(seed)}")

def image_path(request: ImageRequest) -> str:
    """
    Picks the path shape from the request itself: a fixed id wins over a
    seed, and a request with neither is a random image.
    """

    if request.id is not None:
        return id_path(request.id, request)

    if request.seed is not None:
        return seed_path(request.seed, request)

    return random_path(request)

def info_path(image_id) -> str:
    image_id = _check_identifier("Image id", image_id)

    return f"/id/{_segment(image_id)}/info"

def list_path() -> str:
    return "/v2/list"

def query_params(request: ImageRequest) -> dict:
    params = {}

    # Forwarded verbatim, the upstream service owns the accepted range.
    if request.blur is not None:
        params["blur"] = request.blur

    return params

def build_url(base_url: str, path: str, params: Optional[dict] = None) -> str:
    url = f"{base_url.rstrip('/')}{path}"

    if params:
        url += "?" + urlencode(params)

    return url
