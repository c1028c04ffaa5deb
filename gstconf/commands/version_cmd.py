"""
Version command - displays gstconf version information
"""

from gstconf.version import GSTCONF_VERSION


def run_version(verbose: bool = False) -> None:
    """
    Display gstconf version information.

    Args:
        verbose: If True, also show the source digest and release date
    """
    if not verbose:
        print(f"gstconf {GSTCONF_VERSION}")
        return

    major, minor, patch = GSTCONF_VERSION.semver()
    print(f"gstconf version {GSTCONF_VERSION.full_version()}")
    print("\nDetailed version information:")
    print(f"  Semantic Version: {major}.{minor}.{patch}")
    print(f"  Release Date:     {GSTCONF_VERSION.date_string()}")
    print(f"  Source Digest:    {GSTCONF_VERSION.hash}")
