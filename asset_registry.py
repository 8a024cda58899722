# asset_registry.py
import logging
import os
from enum import Enum

import requests

from config import ASSET_BASE_URL, REQUEST_TIMEOUT
from errors import AssetNotFound
from field_labels import COMPRESSOR_MODELS

logger = logging.getLogger(__name__)


class DocumentKind(Enum):
    DRAWING = "Dr"
    MANUAL = "MA"

    @property
    def label(self):
        return self.name.capitalize()


class AssetRegistry:
    """Static lookup of model images and technical documents."""

    def __init__(self, base: str = ASSET_BASE_URL, models=None):
        self.base = base.rstrip("/")
        self.models = list(models if models is not None else COMPRESSOR_MODELS)
        self._images = {model: f"{model}.png" for model in self.models}

    def image_path(self, model):
        """Reference image of a model, or None when none is registered."""
        return self._images.get(model)

    def document_filename(self, model, kind: DocumentKind):
        return f"{model}_{kind.value}.pdf"

    def document_path(self, model, kind: DocumentKind):
        return self.document_filename(model, kind)

    def locate(self, path):
        """Join an asset path onto the configured base."""
        if self.is_remote:
            return f"{self.base}/{path}"
        return os.path.join(self.base, path)

    @property
    def is_remote(self):
        return self.base.startswith(("http://", "https://"))


def read_asset(location, session=None, timeout: float = REQUEST_TIMEOUT) -> bytes:
    """Fetch an asset from an http(s) URL or the local filesystem."""
    if location.startswith(("http://", "https://")):
        http = session if session is not None else requests
        try:
            response = http.get(location, timeout=timeout)
        except requests.RequestException as e:
            raise AssetNotFound(location, str(e)) from e
        if not response.ok:
            raise AssetNotFound(location, f"HTTP {response.status_code} {response.reason or ''}".strip())
        logger.debug("Fetched %s (%d bytes)", location, len(response.content))
        return response.content

    try:
        with open(location, "rb") as f:
            return f.read()
    except OSError as e:
        raise AssetNotFound(location, e.strerror or str(e)) from e
