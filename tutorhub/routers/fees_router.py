# /tutorhub/routers/fees_router.py

from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, status
from fastapi.responses import StreamingResponse

from ..core.deps import get_teacher, get_viewable_student
from ..models import fee_model
from ..models.profile_model import Profile
from ..services import database_service, fee_service
from ..services.reporting_helpers.errors import FeeAlreadySettled

router = APIRouter()


@router.get("", response_model=List[fee_model.FeeRecord], summary="List Fee Records")
def list_fees(
    month: Optional[str] = None,
    student_id: Optional[str] = None,
    db: database_service.DatabaseService = Depends(database_service.get_db_service),
    teacher: Profile = Depends(get_teacher),
):
    return fee_service.list_fees(db=db, month=month, student_id=student_id)


@router.post("", response_model=fee_model.FeeRecord, status_code=status.HTTP_201_CREATED, summary="Create a Fee Record")
def create_fee(
    fee_create: fee_model.FeeCreate,
    db: database_service.DatabaseService = Depends(database_service.get_db_service),
    teacher: Profile = Depends(get_teacher),
):
    try:
        return fee_service.create_fee(fee_data=fee_create, db=db)
    except ValueError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))


@router.get("/summary", response_model=fee_model.FeeSummary, summary="Fee Ledger Summary")
def get_fee_summary(
    month: Optional[str] = None,
    db: database_service.DatabaseService = Depends(database_service.get_db_service),
    teacher: Profile = Depends(get_teacher),
):
    return fee_service.get_summary(db=db, month=month)


@router.post("/{fee_id}/pay", response_model=fee_model.FeeRecord, summary="Mark a Fee as Paid")
def mark_fee_paid(
    fee_id: str,
    request: fee_model.MarkPaidRequest,
    db: database_service.DatabaseService = Depends(database_service.get_db_service),
    teacher: Profile = Depends(get_teacher),
):
    try:
        updated = fee_service.mark_fee_paid(fee_id=fee_id, request=request, db=db)
    except FeeAlreadySettled as e:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(e))
    if updated is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=f"Fee record with ID {fee_id} not found")
    return updated


@router.get("/export", summary="Export Fee Ledger as CSV", response_class=StreamingResponse)
def export_fees_csv(
    month: Optional[str] = None,
    db: database_service.DatabaseService = Depends(database_service.get_db_service),
    teacher: Profile = Depends(get_teacher),
):
    csv_string = fee_service.export_fees_as_csv(db=db, month=month)
    suffix = month.replace(' ', '_').lower() if month else "all"
    return StreamingResponse(iter([csv_string]), media_type="text/csv", headers={"Content-Disposition": f"attachment; filename=fees_{suffix}.csv"})


@router.get("/students/{student_id}", response_model=List[fee_model.FeeRecord], summary="A Student's Fee History")
def get_student_fees(
    student=Depends(get_viewable_student),
    db: database_service.DatabaseService = Depends(database_service.get_db_service),
):
    return fee_service.list_fees(db=db, student_id=student.id)
