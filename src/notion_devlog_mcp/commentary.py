"""Heuristic reviewer commentary for logged sessions."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable

PURPOSE_DETAIL_THRESHOLD = 50
SPECIFICITY_MARKERS = ("file", "function")

CLEAR_PURPOSE_REMARK = "✓ The purpose of the change is clearly stated"
ELABORATE_PURPOSE_REMARK = (
    "! Describing the purpose in more detail will make this session easier to look back on"
)
SPECIFIC_CHANGES_REMARK = "✓ Specific files or function names are mentioned"
ERRORS_RECORDED_REMARK = "✓ Errors and their resolutions are recorded for future reference"
CLOSING_REMARK = (
    "\n[Third-party engineer's view]\n"
    "The granularity of this record is appropriate. Keeping this pace will make "
    "reviewing and learning from development efficient."
)


@dataclass(frozen=True, slots=True)
class _Inputs:
    purpose: str
    changes: str
    errors: str | None


@dataclass(frozen=True, slots=True)
class CommentRule:
    name: str
    remark: Callable[[_Inputs], str | None]


def _purpose_clarity(inputs: _Inputs) -> str | None:
    if len(inputs.purpose) > PURPOSE_DETAIL_THRESHOLD:
        return CLEAR_PURPOSE_REMARK
    return ELABORATE_PURPOSE_REMARK


def _change_specificity(inputs: _Inputs) -> str | None:
    if any(marker in inputs.changes for marker in SPECIFICITY_MARKERS):
        return SPECIFIC_CHANGES_REMARK
    return None


def _errors_recorded(inputs: _Inputs) -> str | None:
    if inputs.errors:
        return ERRORS_RECORDED_REMARK
    return None


def _closing(_: _Inputs) -> str | None:
    return CLOSING_REMARK


# Evaluated in order; the output order is asserted on.
RULES: tuple[CommentRule, ...] = (
    CommentRule("purpose_clarity", _purpose_clarity),
    CommentRule("change_specificity", _change_specificity),
    CommentRule("errors_recorded", _errors_recorded),
    CommentRule("closing", _closing),
)


def generate_comment(purpose: str, changes: str, errors: str | None = None) -> str:
    """Build the multi-line commentary used when the caller supplies none."""

    inputs = _Inputs(purpose=purpose, changes=changes, errors=errors)
    remarks = [remark for rule in RULES if (remark := rule.remark(inputs)) is not None]
    return "\n".join(remarks)


__all__ = [
    "CLEAR_PURPOSE_REMARK",
    "CLOSING_REMARK",
    "ELABORATE_PURPOSE_REMARK",
    "ERRORS_RECORDED_REMARK",
    "RULES",
    "SPECIFIC_CHANGES_REMARK",
    "generate_comment",
]
