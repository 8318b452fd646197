"""Exception types shared across pkgprobe modules."""


class PkgProbeError(Exception):
    """Base class for pkgprobe errors."""


class ConfigError(PkgProbeError):
    """Raised when a configuration file or value is invalid."""


class ExtractionError(PkgProbeError):
    """Raised when a build recipe cannot be turned into name/version/sources.

    Args:
        path: Recipe path that failed.
        reason: Human readable cause.
    """

    def __init__(self, path: str, reason: str):
        super().__init__(f"cannot parse {path}: {reason}")
        self.path = path
        self.reason = reason
