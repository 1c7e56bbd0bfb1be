"""Tests for Maven BOM parsing and the maven-bom recommendation provider."""

from pathlib import Path

import pytest

from versions_check.errors import ConfigurationMissing, ResolutionFailure
from versions_check.parsers.maven_bom import parse_maven_bom
from versions_check.recommenders import maven_bom

NAMESPACED_BOM = """<?xml version="1.0" encoding="UTF-8"?>
<project xmlns="http://maven.apache.org/POM/4.0.0">
  <modelVersion>4.0.0</modelVersion>
  <groupId>com.fasterxml.jackson</groupId>
  <artifactId>jackson-bom</artifactId>
  <version>2.15.2</version>
  <packaging>pom</packaging>
  <properties>
    <jackson.version>${project.version}</jackson.version>
    <jackson.version.annotations>2.15.1</jackson.version.annotations>
  </properties>
  <dependencyManagement>
    <dependencies>
      <dependency>
        <groupId>${project.groupId}.core</groupId>
        <artifactId>jackson-databind</artifactId>
        <version>${jackson.version}</version>
      </dependency>
      <dependency>
        <groupId>com.fasterxml.jackson.core</groupId>
        <artifactId>jackson-annotations</artifactId>
        <version>${jackson.version.annotations}</version>
      </dependency>
      <dependency>
        <groupId>com.fasterxml.jackson.core</groupId>
        <artifactId>jackson-unknown</artifactId>
        <version>${undefined.version}</version>
      </dependency>
      <dependency>
        <groupId>com.fasterxml.jackson.core</groupId>
        <artifactId>jackson-unversioned</artifactId>
      </dependency>
      <dependency>
        <groupId>org.junit</groupId>
        <artifactId>junit-bom</artifactId>
        <version>5.9.3</version>
        <type>pom</type>
        <scope>import</scope>
      </dependency>
    </dependencies>
  </dependencyManagement>
</project>
"""

PLAIN_BOM = """<project>
  <dependencyManagement>
    <dependencies>
      <dependency>
        <groupId>org.slf4j</groupId>
        <artifactId>slf4j-api</artifactId>
        <version>2.0.7</version>
      </dependency>
    </dependencies>
  </dependencyManagement>
</project>
"""


def _write(tmp_path: Path, name: str, content: str) -> Path:
    path = tmp_path / name
    path.write_text(content)
    return path


class TestParseMavenBom:
    """Tests for parse_maven_bom."""

    def test_properties_are_substituted(self, tmp_path: Path):
        managed = parse_maven_bom(_write(tmp_path, "jackson-bom.pom", NAMESPACED_BOM))

        assert managed["com.fasterxml.jackson.core:jackson-databind"] == "2.15.2"
        assert managed["com.fasterxml.jackson.core:jackson-annotations"] == "2.15.1"

    def test_unknown_placeholder_left_verbatim(self, tmp_path: Path):
        managed = parse_maven_bom(_write(tmp_path, "jackson-bom.pom", NAMESPACED_BOM))

        assert managed["com.fasterxml.jackson.core:jackson-unknown"] == "${undefined.version}"

    def test_unversioned_and_imported_entries_skipped(self, tmp_path: Path):
        managed = parse_maven_bom(_write(tmp_path, "jackson-bom.pom", NAMESPACED_BOM))

        assert "com.fasterxml.jackson.core:jackson-unversioned" not in managed
        assert "org.junit:junit-bom" not in managed

    def test_pom_without_namespace(self, tmp_path: Path):
        assert parse_maven_bom(_write(tmp_path, "bom.pom", PLAIN_BOM)) == {"org.slf4j:slf4j-api": "2.0.7"}

    def test_pom_without_dependency_management(self, tmp_path: Path):
        assert parse_maven_bom(_write(tmp_path, "bom.pom", "<project/>")) == {}

    def test_invalid_xml(self, tmp_path: Path):
        with pytest.raises(ValueError, match="Invalid BOM"):
            parse_maven_bom(_write(tmp_path, "bom.pom", "<project>"))

    def test_missing_file(self, tmp_path: Path):
        with pytest.raises(FileNotFoundError):
            parse_maven_bom(tmp_path / "missing.pom")


class TestMavenBomProvider:
    """Tests for the bundled recommendation hook, called directly."""

    def test_no_boms_contributes_nothing(self, tmp_path: Path):
        assert maven_bom.collect_recommendations(tmp_path, []) is None

    def test_later_boms_override_earlier(self, tmp_path: Path):
        first = _write(tmp_path, "first.pom", PLAIN_BOM)
        second = _write(tmp_path, "second.pom", PLAIN_BOM.replace("2.0.7", "2.0.9"))

        assert maven_bom.collect_recommendations(tmp_path, [first, second]) == {"org.slf4j:slf4j-api": "2.0.9"}

    def test_missing_bom(self, tmp_path: Path):
        with pytest.raises(ConfigurationMissing):
            maven_bom.collect_recommendations(tmp_path, [tmp_path / "missing.pom"])

    def test_invalid_bom(self, tmp_path: Path):
        with pytest.raises(ResolutionFailure):
            maven_bom.collect_recommendations(tmp_path, [_write(tmp_path, "bad.pom", "<project>")])
