"""pqMuDH error types."""


class PqmudhError(Exception):
    """Base exception for pqMuDH key agreement errors."""
    pass


class EdwardsConversionError(PqmudhError):
    """Montgomery u-coordinate has no Edwards lift."""
    pass


class KemError(PqmudhError):
    """KEM operation error."""
    pass


class DerivationError(PqmudhError):
    """HKDF output length out of range."""
    pass


class InvalidKeyError(PqmudhError):
    """Key material has the wrong length."""
    pass


class ConfigError(PqmudhError):
    """Configuration error."""
    pass


class AgreementError(PqmudhError):
    """X25519 agreement failed (low-order peer key)."""
    pass
