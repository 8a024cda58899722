# exporter.py
import base64
import binascii
import logging
from contextlib import contextmanager
from io import BytesIO

import requests
from PIL import Image, UnidentifiedImageError

from asset_registry import AssetRegistry, DocumentKind, read_asset
from calc_client import DiagramKind, RemoteCalculationClient
from errors import AssetNotFound, CalculationError, CompressorAppError, MissingResponseField
from pdf_report import REPORT_FILENAME, ReferenceImage, generate_pdf_report

logger = logging.getLogger(__name__)

DOWNLOAD_FAILED_NOTICE = "Download failed. Make sure the PDF exists and try again."


class ExportArtifact:
    """A finished file, ready to hand to the browser."""

    def __init__(self, file_name: str, data: bytes, mime: str):
        self.file_name = file_name
        self.data = data
        self.mime = mime

    def __repr__(self):
        return f"ExportArtifact({self.file_name!r}, {len(self.data)} bytes, {self.mime!r})"


class ExportOutcome:
    """Either an artifact or a user-facing notice, never both."""

    def __init__(self, artifact=None, notice=None):
        self.artifact = artifact
        self.notice = notice

    @property
    def ok(self):
        return self.artifact is not None

    @classmethod
    def failed(cls, notice):
        return cls(notice=notice)


class DownloadControl:
    """Label and enabled state of the button that started a download."""

    BUSY_LABEL = "Downloading..."

    def __init__(self, label: str):
        self.label = label
        self.disabled = False

    @contextmanager
    def busy(self):
        original_label = self.label
        self.label = self.BUSY_LABEL
        self.disabled = True
        try:
            yield self
        finally:
            self.label = original_label
            self.disabled = False


# ========================
# IMAGE DECODING
# ========================
def decode_image_payload(payload: str) -> bytes:
    """Strict base64 decode of an embedded image; line breaks are allowed."""
    if isinstance(payload, str):
        payload = "".join(payload.split())
    try:
        return base64.b64decode(payload, validate=True)
    except (binascii.Error, TypeError, ValueError) as e:
        raise MissingResponseField("base64 image") from e


def verify_image(data: bytes):
    """Return (width, height, format) of image bytes, rejecting anything else."""
    try:
        with Image.open(BytesIO(data)) as img:
            size, image_format = img.size, img.format
            img.verify()
    except (UnidentifiedImageError, OSError, SyntaxError) as e:
        raise MissingResponseField("decodable image") from e
    return size[0], size[1], image_format


class ExportOrchestrator:
    """
    Runs the export flows. Every call reads the session as it is when
    invoked and converts failures into notices.
    """

    def __init__(self, client=None, registry=None, http=None):
        self.client = client if client is not None else RemoteCalculationClient()
        self.registry = registry if registry is not None else AssetRegistry()
        self.http = http if http is not None else requests.Session()

    # ------------------------
    # Report
    # ------------------------
    def load_reference_image(self, model):
        """Fetch and decode a model picture; None when unavailable."""
        path = self.registry.image_path(model)
        if path is None:
            return None
        location = self.registry.locate(path)
        try:
            data = read_asset(location, session=self.http)
            width, height, image_format = verify_image(data)
        except (AssetNotFound, MissingResponseField, Image.DecompressionBombError) as e:
            logger.warning("Reference image for %s not loaded: %s", model, e)
            return None
        return ReferenceImage(data, width, height, image_format or "PNG")

    def export_report(self, session):
        fields = session.display_fields()
        model = session.resolved_model()
        try:
            # The document is only finalised once the image load has completed
            image = self.load_reference_image(model)
            data = generate_pdf_report(fields, image)
        except Exception:
            logger.exception("Report generation failed for %s", model)
            return ExportOutcome.failed("Something went wrong while generating the report.")
        logger.info("Report exported for %s", model)
        return ExportOutcome(ExportArtifact(REPORT_FILENAME, data, "application/pdf"))

    # ------------------------
    # PH diagrams
    # ------------------------
    def export_diagram(self, session, kind: DiagramKind):
        form_input = session.form_input.to_dict()
        model = form_input["model"]
        try:
            results = self.client.submit(form_input)
        except CalculationError as e:
            return ExportOutcome.failed(f"Error from calculation service: {e.message}")
        except CompressorAppError as e:
            logger.error("Calculation step of %s export failed: %s", kind.title, e)
            return ExportOutcome.failed(f"Something went wrong while generating {kind.title}.")
        except Exception:
            logger.exception("Calculation step of %s export failed", kind.title)
            return ExportOutcome.failed(f"Something went wrong while generating {kind.title}.")

        try:
            body = self.client.render_diagram(results, kind)
            data = decode_image_payload(body[kind.response_field])
            verify_image(data)
        except MissingResponseField as e:
            logger.warning("%s export for %s: %s", kind.title, model, e)
            return ExportOutcome.failed(f"No {kind.title} image found in API response.")
        except CompressorAppError as e:
            logger.error("Rendering step of %s export failed: %s", kind.title, e)
            return ExportOutcome.failed(f"Something went wrong while generating {kind.title}.")
        except Exception:
            logger.exception("Rendering step of %s export failed for %s", kind.title, model)
            return ExportOutcome.failed(f"Something went wrong while generating {kind.title}.")

        logger.info("%s exported for %s (%d bytes)", kind.title, model, len(data))
        return ExportOutcome(ExportArtifact(f"{model}{kind.filename_suffix}", data, "image/jpeg"))

    # ------------------------
    # Drawings and manuals
    # ------------------------
    def export_document(self, model, kind: DocumentKind, control=None):
        control = control if control is not None else DownloadControl(f"Download {kind.label}")
        location = self.registry.locate(self.registry.document_path(model, kind))
        with control.busy():
            try:
                data = read_asset(location, session=self.http)
            except AssetNotFound as e:
                logger.error("Download failed: %s", e)
                return ExportOutcome.failed(DOWNLOAD_FAILED_NOTICE)
            except Exception:
                logger.exception("Download of %s %s failed", model, kind.label)
                return ExportOutcome.failed(DOWNLOAD_FAILED_NOTICE)
        file_name = self.registry.document_filename(model, kind)
        logger.info("Document %s downloaded (%d bytes)", file_name, len(data))
        return ExportOutcome(ExportArtifact(file_name, data, "application/pdf"))
