"""Read-merge-write patching of the ``package.json`` manifest."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from express_scaffold.config import ScaffoldConfig
from express_scaffold.errors import ManifestError
from express_scaffold.utils import load_json, save_json


def apply_manifest_patch(manifest: dict[str, Any], config: ScaffoldConfig) -> dict[str, Any]:
    """Return a copy of *manifest* with the module type and scripts set.

    Every other top-level field and every script other than ``start`` and
    ``dev`` is kept as-is.  A missing or non-object ``scripts`` entry is
    replaced by an empty object before the two scripts are added.
    """
    patched = dict(manifest)
    patched["type"] = config.module_type

    scripts = patched.get("scripts")
    scripts = dict(scripts) if isinstance(scripts, dict) else {}
    scripts["start"] = config.start_script
    scripts["dev"] = config.dev_script
    patched["scripts"] = scripts
    return patched


def patch_manifest(root: Path, config: ScaffoldConfig | None = None) -> dict[str, Any]:
    """Patch the manifest under *root* in place and return the written data.

    Raises:
        ManifestError: If the manifest is missing, cannot be decoded, is not
            a JSON object, or cannot be written back.
    """
    config = config or ScaffoldConfig()
    path = config.manifest_path(root)

    try:
        manifest = load_json(path)
    except FileNotFoundError as exc:
        raise ManifestError(f"Manifest not found: {path}", path=path) from exc
    except (json.JSONDecodeError, UnicodeDecodeError) as exc:
        raise ManifestError(f"Manifest is not valid JSON: {path} ({exc})", path=path) from exc
    except OSError as exc:
        raise ManifestError(f"Could not read manifest {path}: {exc}", path=path) from exc

    if not isinstance(manifest, dict):
        raise ManifestError(f"Manifest must contain a JSON object: {path}", path=path)

    patched = apply_manifest_patch(manifest, config)

    try:
        save_json(patched, path)
    except OSError as exc:
        raise ManifestError(f"Could not write manifest {path}: {exc}", path=path) from exc

    return patched
