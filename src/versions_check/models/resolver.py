"""Resolver plugin metadata models."""

from dataclasses import dataclass, field


@dataclass
class ResolverInfo:
    """Information about an artifact resolver plugin.

    Each resolver plugin returns a dict from register_artifact_resolvers()
    which is converted to this class via from_dict().

    Attributes:
        name: Resolver name (e.g., 'gradle-lockfile')
        description: Human-readable description
        build_files: Files the resolver reads (e.g., ['gradle.lockfile'])
        available: Whether the resolver can run in this environment
    """

    name: str
    description: str
    build_files: list[str] = field(default_factory=list)
    available: bool = True

    @classmethod
    def from_dict(cls, d: dict) -> "ResolverInfo":
        """Create ResolverInfo from plugin dict.

        Args:
            d: Dict with resolver info fields

        Returns:
            ResolverInfo instance
        """
        return cls(
            name=d["name"],
            description=d["description"],
            build_files=d.get("build_files", []),
            available=d.get("available", True),
        )


@dataclass(frozen=True)
class ConfigurationRef:
    """One dependency configuration of one build project."""

    project: str
    """Project path (e.g., ':' or ':service:api')"""

    configuration: str
    """Configuration name (e.g., 'runtimeClasspath')"""

    resolvable: bool = True
    """Only resolvable configurations contribute artifacts"""

    @classmethod
    def from_dict(cls, d: dict) -> "ConfigurationRef":
        return cls(
            project=d["project"],
            configuration=d["configuration"],
            resolvable=d.get("resolvable", True),
        )

    def __str__(self) -> str:
        separator = "" if self.project.endswith(":") else ":"
        return f"{self.project}{separator}{self.configuration}"
