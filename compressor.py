# compressor.py
import logging

from errors import CalculationError, ConnectionFailure, ResponseFormatError
from field_labels import COMPRESSOR_MODELS, REFRIGERANTS
from reconciler import reconcile

logger = logging.getLogger(__name__)

CONNECTION_FAILURE_MESSAGE = "Failed to connect to backend"
RESPONSE_FORMAT_MESSAGE = "Unexpected response from calculation service"


class FormInput:
    """Operating parameters of one calculation, always fully defined."""

    FLOAT_FIELDS = ("evap_temp", "cond_temp", "superheat")
    INT_FIELDS = ("speed",)

    def __init__(self, model: str = COMPRESSOR_MODELS[0], refrigerant: str = REFRIGERANTS[0],
                 evap_temp: float = 10.0, cond_temp: float = 30.0,
                 superheat: float = 0.0, speed: int = 2980):
        self.model = model
        self.refrigerant = refrigerant
        self.evap_temp = evap_temp
        self.cond_temp = cond_temp
        self.superheat = superheat
        self.speed = speed

    def keys(self):
        return ["model", "refrigerant", "evap_temp", "cond_temp", "superheat", "speed"]

    def to_dict(self):
        """Flat request payload, in form order."""
        return {key: getattr(self, key) for key in self.keys()}

    def update(self, key, raw):
        """Apply one user edit, coercing numeric fields from their raw text."""
        if key not in self.keys():
            raise KeyError(key)
        setattr(self, key, self._coerce(key, raw))

    def _coerce(self, key, raw):
        if key not in self.FLOAT_FIELDS and key not in self.INT_FIELDS:
            return raw
        if isinstance(raw, str):
            raw = raw.strip()
        try:
            number = float(raw)
        except (TypeError, ValueError):
            # Kept verbatim; reconciliation passes text through unchanged
            return raw
        if key in self.INT_FIELDS and number.is_integer():
            return int(number)
        return number

    def __eq__(self, other):
        return isinstance(other, FormInput) and self.to_dict() == other.to_dict()

    def __repr__(self):
        return f"FormInput({self.to_dict()!r})"


class CalculatorSession:
    """
    Mutable state of one user session.

    Owned by the front end and handed to reconciliation and export code,
    which read it at the moment they run.
    """

    def __init__(self, form_input=None):
        self.form_input = form_input if form_input is not None else FormInput()
        self.results = None
        self.error = ""

    def update_field(self, key, raw):
        self.form_input.update(key, raw)

    def submit(self, client):
        """Send the current input to the service and store the outcome."""
        payload = self.form_input.to_dict()
        try:
            results = client.submit(payload)
        except CalculationError as e:
            logger.warning("Calculation rejected for %s: %s", payload.get("model"), e.message)
            self.error = e.message
            self.results = None
            return False
        except ConnectionFailure as e:
            # Previous results stay on screen
            logger.error("Calculation request failed: %s", e)
            self.error = CONNECTION_FAILURE_MESSAGE
            return False
        except ResponseFormatError as e:
            logger.error("Calculation response rejected: %s", e)
            self.error = RESPONSE_FORMAT_MESSAGE
            return False

        self.results = dict(results)
        self.error = ""
        logger.info("Stored %d result fields for %s", len(self.results), payload.get("model"))
        return True

    def display_fields(self):
        return reconcile(self.form_input.to_dict(), self.results)

    def resolved_model(self):
        """Model named by the latest results, else the selected one."""
        if self.results and self.results.get("Compressor Model"):
            return str(self.results["Compressor Model"])
        return self.form_input.model
