"""Data models for package coordinates and release resolution."""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Tuple


@dataclass(frozen=True)
class PackageCoordinate:
    """A ``groupId:artifactId`` coordinate.

    The artifact id may carry a Scala binary suffix (``cats-core_2.13``);
    ``artifact`` and ``scala_version`` expose the two halves.
    """
    group_id: str
    artifact_id: str

    @classmethod
    def parse(cls, package_name: str) -> "PackageCoordinate":
        """Parse ``groupId:artifactId``.

        Raises:
            ValueError: If the coordinate is not exactly two non-empty parts.
        """
        parts = [p.strip() for p in (package_name or "").split(":")]
        if len(parts) != 2 or not all(parts):
            raise ValueError(
                f"Invalid coordinate '{package_name}'. Expected 'groupId:artifactId'."
            )
        return cls(group_id=parts[0], artifact_id=parts[1])

    @property
    def package_name(self) -> str:
        return f"{self.group_id}:{self.artifact_id}"

    @property
    def group_segments(self) -> Tuple[str, ...]:
        return tuple(self.group_id.split("."))

    @property
    def artifact(self) -> str:
        return self.artifact_id.split("_")[0]

    @property
    def scala_version(self) -> Optional[str]:
        pieces = self.artifact_id.split("_")
        if len(pieces) > 1 and pieces[1]:
            return pieces[1]
        return None


@dataclass
class ReleaseMetadata:
    """Homepage and source repository harvested from a descriptor."""
    homepage: Optional[str] = None
    source_url: Optional[str] = None


@dataclass
class Release:
    """A single published version."""
    version: str


@dataclass
class ReleaseResult:
    """Resolution outcome: ordered releases plus optional metadata."""
    releases: List[Release] = field(default_factory=list)
    homepage: Optional[str] = None
    source_url: Optional[str] = None
    dependency_url: Optional[str] = None
    registry_url: Optional[str] = None

    @classmethod
    def from_versions(
        cls,
        versions: List[str],
        metadata: Optional[ReleaseMetadata] = None,
        dependency_url: Optional[str] = None,
        registry_url: Optional[str] = None,
    ) -> "ReleaseResult":
        metadata = metadata or ReleaseMetadata()
        return cls(
            releases=[Release(version=v) for v in versions],
            homepage=metadata.homepage,
            source_url=metadata.source_url,
            dependency_url=dependency_url,
            registry_url=registry_url,
        )

    @property
    def versions(self) -> List[str]:
        return [r.version for r in self.releases]

    def to_dict(self) -> Dict[str, Any]:
        """Serialize to a JSON-friendly dict, omitting absent fields."""
        out: Dict[str, Any] = {"releases": [{"version": r.version} for r in self.releases]}
        for key in ("homepage", "source_url", "dependency_url", "registry_url"):
            value = getattr(self, key)
            if value is not None:
                out[key] = value
        return out
