"""Non-fatal validation of resolved metadata.

Each rule is a plain function returning Ok() or Invalid(rule, message).
validate_metadata() runs all rules and returns the failures; it never
raises.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Union

from mdmeta.core.config import ValidationConfig
from mdmeta.metadata.model.fields import CONFIDENTIALITY_LEVELS
from mdmeta.metadata.model.types import DocumentMetadata


@dataclass(frozen=True)
class Ok:
    """Rule passed."""


@dataclass(frozen=True)
class Invalid:
    """Rule failed.

    Attributes:
        rule: Name of the failing rule.
        message: Human readable warning.
    """

    rule: str
    message: str


ValidationOutcome = Union[Ok, Invalid]
ValidationRule = Callable[[DocumentMetadata, ValidationConfig], ValidationOutcome]


def check_required_title(metadata: DocumentMetadata, rules: ValidationConfig) -> ValidationOutcome:
    if rules.require_title and not metadata.title:
        return Invalid("require_title", "Title is required but not provided")
    return Ok()


def check_required_author(metadata: DocumentMetadata, rules: ValidationConfig) -> ValidationOutcome:
    if rules.require_author and not metadata.author:
        return Invalid("require_author", "Author is required but not provided")
    return Ok()


def check_keyword_length(metadata: DocumentMetadata, rules: ValidationConfig) -> ValidationOutcome:
    keywords = metadata.keywords
    if keywords and len(str(keywords)) > rules.max_keyword_length:
        return Invalid(
            "max_keyword_length",
            f"Keywords exceed maximum length ({rules.max_keyword_length})",
        )
    return Ok()


def check_subject_length(metadata: DocumentMetadata, rules: ValidationConfig) -> ValidationOutcome:
    subject = metadata.subject
    if subject and len(str(subject)) > rules.max_subject_length:
        return Invalid(
            "max_subject_length",
            f"Subject exceeds maximum length ({rules.max_subject_length})",
        )
    return Ok()


def check_confidentiality(metadata: DocumentMetadata, rules: ValidationConfig) -> ValidationOutcome:
    level = metadata.confidentiality
    if level and str(level).lower() not in CONFIDENTIALITY_LEVELS:
        return Invalid(
            "confidentiality",
            f"Confidentiality must be one of: {', '.join(CONFIDENTIALITY_LEVELS)}",
        )
    return Ok()


DEFAULT_RULES: tuple[ValidationRule, ...] = (
    check_required_title,
    check_required_author,
    check_keyword_length,
    check_subject_length,
    check_confidentiality,
)


def validate_metadata(
    metadata: DocumentMetadata,
    rules: ValidationConfig,
    checks: tuple[ValidationRule, ...] = DEFAULT_RULES,
) -> list[Invalid]:
    """Run validation rules against resolved metadata.

    Args:
        metadata: Resolved metadata.
        rules: Validation settings.
        checks: Rule functions to run, in order.

    Returns:
        Failed outcomes in rule order (empty when everything passes).
    """
    failures = []
    for check in checks:
        outcome = check(metadata, rules)
        if isinstance(outcome, Invalid):
            failures.append(outcome)
    return failures
