class ConfigurationError(RuntimeError):
    """Raised when a required backend credential or setting is missing."""
