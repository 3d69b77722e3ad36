class ChromashiftError(ValueError):
    """Base class for conversion failures."""


class InvalidInput(ChromashiftError):
    """A numeric component lies outside its closed interval."""

    def __init__(self, kind: str, component: str, value) -> None:
        self.kind = kind
        self.component = component
        self.value = value
        super().__init__(f"invalid {kind} value: {component}={value!r}")


class InvalidFormat(ChromashiftError):
    """A hex string has the wrong length or non-hex characters."""

    def __init__(self, text) -> None:
        self.text = text
        super().__init__(f"invalid hex: {text!r} (expected 6 or 8 hex digits)")


class AchromaticShortcutWarning(UserWarning):
    """Zero saturation was mapped to white regardless of lightness or value."""
