# jexpense/services/tag_reports.py

from typing import List

from jexpense.constants.procedures import REPORTS_BY_TAGS, TRANSACTIONS_BY_TAG_ID
from jexpense.core.errors import NotFoundError
from jexpense.database import DataAccess, Filter, validate_rows
from jexpense.schemas.report import TagReport
from jexpense.schemas.transaction import TransactionRead


def reports_by_tags(data: DataAccess) -> List[TagReport]:
    rows = data.run_procedure_rows(REPORTS_BY_TAGS)
    return validate_rows(TagReport, rows, REPORTS_BY_TAGS)


def transactions_by_tag_id(data: DataAccess, tag_id: int) -> List[TransactionRead]:
    """Transacciones de una etiqueta; si la etiqueta no existe no se llama al procedimiento."""
    tags = data.query("tags", filters=[Filter("id", "eq", tag_id)], columns=["id"])
    if not tags:
        raise NotFoundError(f"Tag {tag_id} not found")

    rows = data.run_procedure_rows(TRANSACTIONS_BY_TAG_ID, {"tag_id": tag_id})
    return validate_rows(TransactionRead, rows, TRANSACTIONS_BY_TAG_ID)
