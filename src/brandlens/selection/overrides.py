"""User role overrides for classified images."""

from dataclasses import replace
from typing import Union

from ..classifier.model import ClassificationResult
from ..classifier.scoring import calculate_display_priority
from ..classifier.taxonomy import ImageRole, coerce_role, role_to_category, should_display_in_brand_guide


def apply_role_override(result: ClassificationResult, role: Union[ImageRole, str]) -> ClassificationResult:
    """
    Return a copy of ``result`` with a user-chosen role.

    Category, display flag and priority follow the new role. The first
    machine-assigned role is kept in ``original_role`` across repeated
    overrides.

    Raises:
        ValueError: If ``role`` is not a known role or legacy role name
    """
    new_role = coerce_role(role)
    if new_role is result.role:
        return result

    return replace(
        result,
        role=new_role,
        category=role_to_category(new_role),
        should_display=should_display_in_brand_guide(new_role),
        display_priority=calculate_display_priority(new_role, result.signals),
        user_overridden=True,
        original_role=result.original_role or result.role,
    )
