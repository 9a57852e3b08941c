# /tutorhub/services/database_helpers/fee_repository_sql.py

from typing import Dict, List, Optional
from sqlalchemy.orm import Session

from tutorhub.db.models.fee_models import FeeRecord


class FeeRepositorySQL:
    def __init__(self, db_session: Session):
        self.db = db_session

    def get_fees(self, month: Optional[str] = None, student_id: Optional[str] = None) -> List[FeeRecord]:
        query = self.db.query(FeeRecord)
        if month:
            query = query.filter(FeeRecord.month == month)
        if student_id:
            query = query.filter(FeeRecord.student_id == student_id)
        return query.order_by(FeeRecord.created_at.desc()).all()

    def get_fee_by_id(self, fee_id: str) -> Optional[FeeRecord]:
        return self.db.query(FeeRecord).filter(FeeRecord.id == fee_id).first()

    def get_fee_for_period(self, student_id: str, month: str) -> Optional[FeeRecord]:
        return (
            self.db.query(FeeRecord)
            .filter(FeeRecord.student_id == student_id, FeeRecord.month == month)
            .first()
        )

    def add_fee(self, record: Dict) -> FeeRecord:
        new_fee = FeeRecord(**record)
        self.db.add(new_fee)
        self.db.commit()
        self.db.refresh(new_fee)
        return new_fee

    def update_fee(self, fee_id: str, data: Dict) -> Optional[FeeRecord]:
        db_fee = self.get_fee_by_id(fee_id)
        if db_fee:
            for key, value in data.items():
                setattr(db_fee, key, value)
            self.db.commit()
            self.db.refresh(db_fee)
        return db_fee
