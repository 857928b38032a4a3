"""
Pydantic models for Spira.

Machine-readable description of the running release.
"""

from typing import Optional

from pydantic import BaseModel, Field

from spira.version import BUILD_DATE, GIT_COMMIT, VersionInfo


class VersionResponse(BaseModel):
    """Version details as emitted by `spira version --format json`."""
    version: str
    major: int = Field(ge=0)
    minor: int = Field(ge=0)
    patch: int = Field(ge=0)
    extra: Optional[str] = None
    prerelease: bool = False
    build_date: str = BUILD_DATE
    git_commit: str = GIT_COMMIT

    @classmethod
    def from_version(
        cls,
        info: VersionInfo,
        build_date: str = BUILD_DATE,
        git_commit: str = GIT_COMMIT,
    ) -> "VersionResponse":
        return cls(
            **info.to_dict(),
            prerelease=info.is_prerelease,
            build_date=build_date,
            git_commit=git_commit,
        )
