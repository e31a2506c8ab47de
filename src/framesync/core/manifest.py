import tomllib
from dataclasses import dataclass, field
from pathlib import Path

from .errors import ManifestError

MANIFEST_FILENAME = "framesync.toml"


# =============================================================================
# Import Configuration
# =============================================================================


@dataclass
class ImportSettings:
    """Settings consulted while generating the runtime hierarchy."""

    enable_auto_layout: bool = True


# =============================================================================
# Reconcile Configuration
# =============================================================================


@dataclass
class ReconcileSettings:
    """Settings for capturing and merging regenerated hierarchies."""

    release_unmatched: bool = True  # Release snapshots left over at session close
    metadata_suffix: str = ".meta"  # Sidecar files ignored by the snapshot store


@dataclass
class ProjectManifest:
    """Contents of framesync.toml.

    Example:

        [import]
        enable_auto_layout = true

        [reconcile]
        release_unmatched = true
        metadata_suffix = ".meta"
    """

    import_settings: ImportSettings = field(default_factory=ImportSettings)
    reconcile: ReconcileSettings = field(default_factory=ReconcileSettings)


def _expect_bool(table: dict, key: str, default: bool, section: str) -> bool:
    value = table.get(key, default)
    if not isinstance(value, bool):
        raise ManifestError(f"[{section}] {key} must be a boolean, got {value!r}")
    return value


def load_manifest(path: Path) -> ProjectManifest:
    try:
        data = tomllib.loads(path.read_text(encoding="utf-8"))
    except tomllib.TOMLDecodeError as e:
        raise ManifestError(f"Invalid TOML in {path}: {e}") from e

    import_data = data.get("import", {})
    reconcile_data = data.get("reconcile", {})

    import_settings = ImportSettings(
        enable_auto_layout=_expect_bool(import_data, "enable_auto_layout", True, "import"),
    )

    suffix = reconcile_data.get("metadata_suffix", ".meta")
    if not isinstance(suffix, str) or not suffix:
        raise ManifestError(f"[reconcile] metadata_suffix must be a non-empty string, got {suffix!r}")

    reconcile = ReconcileSettings(
        release_unmatched=_expect_bool(reconcile_data, "release_unmatched", True, "reconcile"),
        metadata_suffix=suffix,
    )

    return ProjectManifest(import_settings=import_settings, reconcile=reconcile)


def find_manifest(project_dir: Path) -> ProjectManifest:
    """Load framesync.toml from ``project_dir``, or defaults when it is absent."""
    path = project_dir / MANIFEST_FILENAME
    if not path.exists():
        return ProjectManifest()
    return load_manifest(path)
