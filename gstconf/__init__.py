"""gstconf - parser for GPU stress test action configurations."""

from gstconf.version.gstconf_version import GSTCONF_VERSION, Version

__version__ = str(GSTCONF_VERSION)
__version_info__ = GSTCONF_VERSION

__all__ = [
    "GSTCONF_VERSION",
    "Version",
    "__version__",
    "__version_info__",
]
