"""
Spira Setup

Version is read from spira/version.py so the release process only
rewrites one file. EXTRA becomes a PEP 440 local version label:
0.0.13 with EXTRA = "beta" installs as 0.0.13+beta.
"""

import re
from pathlib import Path

from setuptools import find_packages, setup


ROOT = Path(__file__).parent


def parse_version(source: str) -> str:
    """Build the version string from the release constants in source."""
    parts = []
    for name in ("MAJOR", "MINOR", "TINY"):
        match = re.search(rf"^{name}\s*=\s*(\d+)", source, re.MULTILINE)
        if match is None:
            raise RuntimeError(f"{name} not found in spira/version.py")
        parts.append(match.group(1))
    # PEP 440 has no ".label" segment, so the extra label becomes a local version
    extra = re.search(r'^EXTRA[^=]*=\s*["\']([^"\']+)["\']', source, re.MULTILINE)
    version = ".".join(parts)
    if extra:
        version = f"{version}+{extra.group(1)}"
    return version


def get_version() -> str:
    return parse_version((ROOT / "spira" / "version.py").read_text(encoding="utf-8"))


# pip executes this file as __main__
if __name__ == "__main__":
    setup(
        name="spira",
        version=get_version(),
        description="Spira - RDF resource mapping for Python",
        packages=find_packages(exclude=["tests", "tests.*"]),
        python_requires=">=3.9",
        install_requires=[
            "typer>=0.9",
            "rich>=13.0",
            "pydantic>=2.0",
        ],
        extras_require={
            "dev": ["pytest>=7.0"],
        },
        entry_points={
            "console_scripts": [
                "spira=spira.cli.main:app",
            ],
        },
    )
