# field_labels.py

# ========================
# CATALOGUES
# ========================
COMPRESSOR_MODELS = [
    "KRS4115", "KRS4133", "KRS4150", "KRS4170", "KRS4195",
    "KRS4225", "KRS3145", "KRS3165", "KRS3193",
]

REFRIGERANTS = ["Ammonia", "R134a", "R404A", "R410A", "R1234yf", "CO2"]

# Placeholder shown when neither the input nor the results hold a value
NO_VALUE = "-"


class FieldLabelMap:
    """Bidirectional table between input parameter keys and display labels."""

    def __init__(self, pairs):
        self._by_key = {}
        self._by_label = {}
        for key, label in pairs:
            if key in self._by_key:
                raise ValueError(f"Duplicate parameter key: {key}")
            if label in self._by_label:
                raise ValueError(f"Duplicate display label: {label}")
            self._by_key[key] = label
            self._by_label[label] = key

    def label_for(self, key: str) -> str:
        """Display label of a key; unmapped keys are their own label."""
        return self._by_key.get(key, key)

    def key_for(self, label: str) -> str:
        """Parameter key behind a label; unmapped labels are their own key."""
        return self._by_label.get(label, label)

    def has_key(self, key: str) -> bool:
        return key in self._by_key

    def keys(self):
        return list(self._by_key)


FIELD_LABELS = FieldLabelMap([
    ("model", "Compressor Model"),
    ("refrigerant", "Refrigerant"),
    ("evap_temp", "Evaporation Temperature (°C)"),
    ("cond_temp", "Condenser Temperature (°C)"),
    ("superheat", "Superheat (°C)"),
    ("speed", "Speed (RPM)"),
])

# Intermediate enthalpies used only by the diagram endpoints
EXCLUDED_KEYS = frozenset({"h1", "h2", "h3"})

# Operating parameters the user controls; echoed service values never win
FORCED_INPUT_LABELS = frozenset(
    FIELD_LABELS.label_for(key) for key in ("evap_temp", "cond_temp", "superheat", "speed")
)

EXCLUDED_LABELS = frozenset(EXCLUDED_KEYS | {FIELD_LABELS.label_for(k) for k in EXCLUDED_KEYS})
