# /tutorhub/services/record_boundary.py

"""
Narrows ORM rows (or row dictionaries) to typed pydantic records before any
aggregator sees them.
"""

from typing import Iterable, List, Optional, Type, TypeVar

from pydantic import BaseModel, ValidationError

from ..core.logging_config import get_logger, log_with_context

logger = get_logger("reporting")

RecordT = TypeVar("RecordT", bound=BaseModel)


def narrow(rows: Optional[Iterable], model: Type[RecordT]) -> List[RecordT]:
    """
    Validates each row against `model`. A row that cannot be narrowed (an
    unknown status, a missing column) is logged and skipped so that one bad row
    does not blank a whole dashboard. `None` narrows to an empty list.
    """
    records = []
    for row in rows or []:
        try:
            records.append(model.model_validate(row))
        except ValidationError as e:
            row_id = row.get("id") if isinstance(row, dict) else getattr(row, "id", None)
            log_with_context(logger, "WARNING", f"Skipping malformed {model.__name__} row",
                             context={"row_id": row_id},
                             extra_data={"errors": e.errors(include_url=False)})
    return records
