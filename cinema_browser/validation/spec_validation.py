from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from cinema_browser.config.model import SpecDocument

VALID_IO = ("input", "output")


@dataclass(frozen=True)
class ValidationIssue:
    """One problem found in a database document, tagged with a stable code."""

    code: str
    message: str


def validate_spec(doc: SpecDocument) -> list[ValidationIssue]:
    """
    Structural checks on a database document.

    Only reports problems; the graph is built from whatever is there regardless.
    """
    issues: list[ValidationIssue] = []
    raw = doc.raw

    if not isinstance(raw.get("cinema"), dict):
        issues.append(ValidationIssue("SPEC_CINEMA", "Missing or invalid 'cinema' section."))

    for section in ("sources", "displays"):
        if not isinstance(raw.get(section), dict):
            issues.append(
                ValidationIssue(f"SPEC_{section.upper()}", f"Missing or invalid '{section}' section.")
            )

    for source_id, source in doc.sources.items():
        issues.extend(_validate_source(source_id, source))

    for display_id, display in doc.displays.items():
        issues.extend(_validate_display(display_id, display, doc))

    return issues


def _validate_source(source_id: str, source: Any) -> list[ValidationIssue]:
    if not isinstance(source, dict):
        return [ValidationIssue("SOURCE_SHAPE", f"Source '{source_id}' must be an object.")]

    issues: list[ValidationIssue] = []
    if not source.get("uri"):
        issues.append(ValidationIssue("SOURCE_URI", f"Source '{source_id}' has no 'uri'."))
    if not source.get("mime"):
        issues.append(ValidationIssue("SOURCE_MIME", f"Source '{source_id}' has no 'mime'."))
    return issues


def _validate_display(display_id: str, display: Any, doc: SpecDocument) -> list[ValidationIssue]:
    if not isinstance(display, dict):
        return [ValidationIssue("DISPLAY_SHAPE", f"Display '{display_id}' must be an object.")]

    issues: list[ValidationIssue] = []

    source_id = display.get("source")
    if not isinstance(source_id, str) or source_id not in doc.sources:
        issues.append(
            ValidationIssue(
                "DISPLAY_SOURCE",
                f"Display '{display_id}' references unknown source {source_id!r}.",
            )
        )

    structures = display.get("structures")
    if not isinstance(structures, dict):
        issues.append(
            ValidationIssue("DISPLAY_STRUCTURES", f"Display '{display_id}' has no 'structures' object.")
        )
        return issues

    for struct_id, struct in structures.items():
        where = f"Structure '{struct_id}' of display '{display_id}'"
        if not isinstance(struct, dict):
            issues.append(ValidationIssue("STRUCTURE_SHAPE", f"{where} must be an object."))
            continue
        if struct.get("io") not in VALID_IO:
            issues.append(
                ValidationIssue("STRUCTURE_IO", f"{where} has io {struct.get('io')!r}; expected 'input' or 'output'.")
            )
        if not struct.get("type"):
            issues.append(ValidationIssue("STRUCTURE_TYPE", f"{where} has no 'type'."))
        arguments = struct.get("arguments")
        if arguments is not None and not isinstance(arguments, dict):
            issues.append(ValidationIssue("STRUCTURE_ARGUMENTS", f"{where} 'arguments' must be an object."))

    return issues
