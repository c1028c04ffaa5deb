from gstconf.version.gstconf_version import GSTCONF_VERSION, Version

__all__ = ["GSTCONF_VERSION", "Version"]
