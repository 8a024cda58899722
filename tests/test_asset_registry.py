from __future__ import annotations

import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(ROOT))

import pytest
import requests

from asset_registry import AssetRegistry, DocumentKind, read_asset
from errors import AssetNotFound
from field_labels import COMPRESSOR_MODELS
from http_fakes import FakeHTTP, FakeResponse


def test_every_model_has_an_image() -> None:
    registry = AssetRegistry("assets")
    for model in COMPRESSOR_MODELS:
        assert registry.image_path(model) == f"{model}.png"
    assert registry.image_path("UNKNOWN") is None


def test_document_paths_use_kind_tags() -> None:
    registry = AssetRegistry("assets")
    assert registry.document_path("KRS4115", DocumentKind.DRAWING) == "KRS4115_Dr.pdf"
    assert registry.document_filename("KRS4115", DocumentKind.MANUAL) == "KRS4115_MA.pdf"
    assert DocumentKind.DRAWING.label == "Drawing"


def test_locate_remote_and_local() -> None:
    assert AssetRegistry("https://cdn.test/assets/").locate("a.png") == "https://cdn.test/assets/a.png"
    local = AssetRegistry("assets")
    assert not local.is_remote
    assert Path(local.locate("a.png")) == Path("assets") / "a.png"


def test_read_local_asset(tmp_path: Path) -> None:
    (tmp_path / "KRS4115_Dr.pdf").write_bytes(b"%PDF-1.4 drawing")
    registry = AssetRegistry(str(tmp_path))
    location = registry.locate(registry.document_path("KRS4115", DocumentKind.DRAWING))
    assert read_asset(location) == b"%PDF-1.4 drawing"


def test_missing_local_asset(tmp_path: Path) -> None:
    with pytest.raises(AssetNotFound):
        read_asset(str(tmp_path / "nope.pdf"))


def test_read_remote_asset() -> None:
    http = FakeHTTP({"https://cdn.test/a.pdf": FakeResponse(content=b"%PDF")})
    assert read_asset("https://cdn.test/a.pdf", session=http) == b"%PDF"


@pytest.mark.parametrize("answer", [
    FakeResponse(404, reason="Not Found"),
    FakeResponse(500, reason="Server Error"),
    requests.Timeout("slow"),
])
def test_remote_failures_are_asset_not_found(answer) -> None:
    http = FakeHTTP({"https://cdn.test/a.pdf": answer})
    with pytest.raises(AssetNotFound):
        read_asset("https://cdn.test/a.pdf", session=http)
