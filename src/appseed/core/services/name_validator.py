"""Project-name validation.

Lexical legality is delegated to the npm naming rules; on top of that the
validator refuses names that would shadow the tool's own runtime
dependencies once the generated project is installed.
"""

from __future__ import annotations

import logging
from typing import Iterable

from appseed.adapters.npm_naming import validate_package_name
from appseed.core.domain.models import ValidationVerdict

logger = logging.getLogger(__name__)

RESERVED_DEPENDENCY_NAMES: tuple[str, ...] = ("react", "react-dom", "react-scripts")


class NameValidator:
    """Approves or rejects a project name, collecting every reason."""

    def __init__(self, reserved_names: Iterable[str] = RESERVED_DEPENDENCY_NAMES) -> None:
        self._reserved = tuple(reserved_names)

    @property
    def reserved_names(self) -> tuple[str, ...]:
        return self._reserved

    def validate(self, name: str) -> ValidationVerdict:
        check = validate_package_name(name)
        if not check.valid_for_new_packages:
            logger.debug("name %r rejected by naming rules: %s", name, check.errors + check.warnings)
            return ValidationVerdict(
                is_valid=False,
                errors=list(check.errors),
                warnings=list(check.warnings),
            )

        if name in self._reserved:
            logger.debug("name %r collides with a reserved dependency", name)
            return ValidationVerdict(
                is_valid=False,
                errors=[
                    "a dependency with the same name exists; the following names are not allowed: "
                    + ", ".join(self._reserved)
                ],
                reserved_collision=True,
            )

        return ValidationVerdict(is_valid=True)
