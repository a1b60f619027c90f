"""Per-field rule composition.

``v()`` bundles field validators into one composed validator that runs
every check and keeps every failure, in the order the checks were given::

    password = v(is_required(), length(length=6), password_complexity())
    password("test", form)
    # ["has to be at least 6 characters long",
    #  "has to contain at least one number or uppercase letter."]
"""

import logging
from typing import Any

from warble._types import ComposedValidator, FieldValidator

logger = logging.getLogger("warble")


def v(*validators: FieldValidator) -> ComposedValidator:
    """Compose field validators for a single field.

    Non-callable arguments are a programming mistake: each one is logged
    and skipped, and the remaining validators still run.
    """
    checks: list[FieldValidator] = []
    for position, validator in enumerate(validators):
        if not callable(validator):
            logger.error(
                "A non-callable was given to 'v' at position %d: %r",
                position,
                validator,
            )
            continue
        checks.append(validator)

    def composed(value: Any, obj: Any = None) -> list[str] | None:
        messages = [message for check in checks if (message := check(value, obj))]
        return messages or None

    return composed
