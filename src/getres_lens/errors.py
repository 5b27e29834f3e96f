class GetResError(Exception):
    """Base class for errors raised by getres-lens."""


class RefreshError(GetResError):
    """Fetching a new resource snapshot failed; the previous snapshot is kept."""


class ConfigError(GetResError):
    """The configured resource source cannot be built."""
