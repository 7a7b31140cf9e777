"""Validation aggregation.

Turns field and global validation failures into ordered sub-errors, one per
input. Field errors come first in input order, then object errors in input
order. Nothing is sorted, merged or dropped, even exact duplicates.
"""

from typing import Iterable, List

from error_handler.classify.failures import FieldFailure, GlobalFailure
from error_handler.codes import generate_or_none
from error_handler.model import FieldError, ObjectError, SubError


def field_error(failure: FieldFailure) -> FieldError:
    """Build the sub-error for one field failure."""
    category = failure.category if failure.category is not None else failure.field
    return FieldError(
        object_name=failure.object_name,
        field=failure.field,
        rejected_value=failure.rejected_value,
        message=failure.message,
        code=generate_or_none(category, failure.message),
    )


def object_error(failure: GlobalFailure) -> ObjectError:
    """Build the sub-error for one global failure."""
    return ObjectError(
        object_name=failure.object_name,
        message=failure.message,
        code=generate_or_none(failure.object_name, failure.message),
    )


def aggregate(
    field_failures: Iterable[FieldFailure] = (),
    global_failures: Iterable[GlobalFailure] = (),
) -> List[SubError]:
    """Aggregate validation failures into sub-errors.

    Args:
        field_failures: Field-level failures in report order
        global_failures: Object-level failures in report order

    Returns:
        A new list with ``len(field_failures) + len(global_failures)`` entries
    """
    sub_errors: List[SubError] = [field_error(failure) for failure in field_failures]
    sub_errors.extend(object_error(failure) for failure in global_failures)
    return sub_errors
