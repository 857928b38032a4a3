"""
Spira - RDF resource mapping for Python

Version information:
    from spira import VERSION, __version__

    VERSION.to_string()   # "0.0.13"
    VERSION.to_tuple()    # (0, 0, 13)

CLI:
    $ spira --version
    $ spira version --format json
"""

from spira.version import VERSION, VersionInfo, __version__, __version_info__

__all__ = [
    "VERSION",
    "VersionInfo",
    "__version__",
    "__version_info__",
]
