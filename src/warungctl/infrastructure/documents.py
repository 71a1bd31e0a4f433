"""Site document I/O.

Loading uses the safe YAML loader and pydantic validation.  Write-back
uses a round-trip parser so an operator's comments and quoting in
``site.yaml`` survive a ``customize --write``.
"""

from __future__ import annotations

from io import StringIO
from pathlib import Path
from typing import Any

from pydantic import ValidationError
from ruamel.yaml import YAML
from ruamel.yaml.comments import CommentedMap
from ruamel.yaml.error import YAMLError

from warungctl.domain.document import ConfigurationDocument


class DocumentError(Exception):
    """The site document is missing, unreadable, or structurally invalid.

    Distinct from validation findings: a document that raises this never
    reaches the binding layer.
    """


def _new_yaml() -> YAML:
    """Create a fresh round-trip YAML parser.

    ruamel.yaml's YAML object is stateful, so each write gets its own.
    """
    y = YAML()
    y.preserve_quotes = True
    y.default_flow_style = False
    y.allow_unicode = True
    return y


def load_document(path: Path) -> ConfigurationDocument:
    """Read and parse the site document at *path*."""
    if not path.is_file():
        msg = f"Site document not found: {path}"
        raise DocumentError(msg)

    try:
        data = YAML(typ="safe").load(path.read_text(encoding="utf-8"))
    except YAMLError as exc:
        msg = f"Invalid YAML in {path}: {exc}"
        raise DocumentError(msg) from exc

    if data is None:
        data = {}
    if not isinstance(data, dict):
        msg = f"Site document {path} must be a mapping at the top level"
        raise DocumentError(msg)

    try:
        return ConfigurationDocument.model_validate(data)
    except ValidationError as exc:
        problems = "; ".join(
            f"{'.'.join(str(p) for p in err['loc'])}: {err['msg']}" for err in exc.errors()
        )
        msg = f"Invalid site document {path}: {problems}"
        raise DocumentError(msg) from exc


def update_document_file(path: Path, changes: dict[str, Any]) -> None:
    """Apply dotted-path *changes* to the YAML file, preserving comments.

    Missing intermediate mappings are created.  ``None`` values remove
    the key.
    """
    y = _new_yaml()
    try:
        data = y.load(path.read_text(encoding="utf-8"))
    except YAMLError as exc:
        msg = f"Invalid YAML in {path}: {exc}"
        raise DocumentError(msg) from exc
    if data is None:
        data = CommentedMap()

    for dotted, value in changes.items():
        *parents, leaf = dotted.split(".")
        node = data
        for key in parents:
            if key not in node or node[key] is None:
                node[key] = CommentedMap()
            node = node[key]
        if value is None:
            node.pop(leaf, None)
        else:
            node[leaf] = value

    buf = StringIO()
    y.dump(data, buf)
    path.write_text(buf.getvalue(), encoding="utf-8")
