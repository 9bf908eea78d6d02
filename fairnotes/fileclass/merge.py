"""
fileClass schema merger.

The template's ``classes/company.md`` describes the metadata fields a
vault user fills in on each company note.  Before notes are written,
the generated columns in `OUTPUT_FIELDS` are appended to that schema so
the vault recognises them too.  `merge_schema` returns the template's
own field names (the renderer emits blank placeholders for them) and
the updated file content.

Merging is not idempotent by default: running it over an already
merged schema appends the generated fields a second time.  Pass
``guard_remerge=True`` to skip fields whose names are already present.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List, NamedTuple, Tuple

import yaml  # type: ignore

from ..errors import TemplateError
from ..fields import OUTPUT_FIELDS
from .frontmatter import join_front_matter, split_front_matter
from .ids import ID_STRATEGIES, legacy_ids, unique_ids

logger = logging.getLogger(__name__)


class MergeResult(NamedTuple):
    user_fields: List[str]
    text: str


class _SchemaDumper(yaml.SafeDumper):
    """Writes null values as empty scalars, the way fileClass notes leave them."""


def _represent_none(dumper: yaml.SafeDumper, _: None) -> yaml.ScalarNode:
    return dumper.represent_scalar("tag:yaml.org,2002:null", "")


_SchemaDumper.add_representer(type(None), _represent_none)


def _descriptor(name: str, field_id: str) -> Dict[str, Any]:
    return {"name": name, "type": "Input", "options": {}, "path": "", "id": field_id}


def load_schema(raw: bytes) -> Tuple[Dict[str, Any], str]:
    """Decode `raw` and return ``(document, body)``."""
    try:
        text = raw.decode("utf-8")
    except UnicodeDecodeError as exc:
        raise TemplateError(f"schema file is not valid UTF-8: {exc}") from exc
    front_matter, body = split_front_matter(text)
    try:
        document = yaml.safe_load(front_matter)
    except yaml.YAMLError as exc:
        raise TemplateError(f"failed to parse yaml: {exc}") from exc
    if not isinstance(document, dict):
        raise TemplateError("schema front matter is not a mapping")
    for key in ("fields", "fieldsOrder"):
        if not isinstance(document.get(key), list):
            raise TemplateError(f"schema front matter has no '{key}' list")
    return document, body


def user_field_names(document: Dict[str, Any]) -> List[str]:
    names: List[str] = []
    for position, descriptor in enumerate(document["fields"]):
        if not isinstance(descriptor, dict) or not isinstance(descriptor.get("name"), str):
            raise TemplateError(f"field {position} in schema has no string 'name'")
        names.append(descriptor["name"])
    return names


def merge_schema(raw: bytes, *, id_strategy: str = "legacy", guard_remerge: bool = False) -> MergeResult:
    """Append the generated output fields to a fileClass schema.

    Args:
        raw: Bytes of the template's schema file.
        id_strategy: ``"legacy"`` or ``"unique"``; see `fileclass.ids`.
        guard_remerge: Skip output fields whose names already exist, and
            leave them out of the returned user field names.

    Returns:
        `MergeResult` of the pre-existing field names and the new file
        text.

    Raises:
        TemplateError: The file cannot be decoded or parsed, or lacks
            the ``fields``/``fieldsOrder`` lists.
    """
    if id_strategy not in ID_STRATEGIES:
        raise TemplateError(f"unknown id strategy: {id_strategy!r}")
    document, body = load_schema(raw)
    user_fields = user_field_names(document)

    new_names = [name for name in OUTPUT_FIELDS if not (guard_remerge and name in user_fields)]
    if len(new_names) < len(OUTPUT_FIELDS):
        logger.info("Schema already defines %d generated field(s); not appending them again",
                    len(OUTPUT_FIELDS) - len(new_names))

    if id_strategy == "legacy":
        field_ids = legacy_ids(len(new_names))
        order_ids = legacy_ids(len(new_names))
    else:
        taken = [d.get("id") for d in document["fields"] if isinstance(d, dict)]
        taken += document["fieldsOrder"]
        field_ids = unique_ids(len(new_names), taken)
        order_ids = list(field_ids)

    for name, field_id in zip(new_names, field_ids):
        document["fields"].append(_descriptor(name, field_id))
        logger.debug("Appended field %s with id %s", name, field_id)
    document["fieldsOrder"].extend(order_ids)

    if guard_remerge:
        # generated columns get their values from the renderer, not placeholders
        user_fields = [name for name in user_fields if name not in OUTPUT_FIELDS]

    dumped = yaml.dump(document, Dumper=_SchemaDumper, sort_keys=False, allow_unicode=True, default_flow_style=False)
    return MergeResult(user_fields, join_front_matter(dumped, body))
