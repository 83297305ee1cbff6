"""
Data access for hospital records.
One repository per entity; each call runs a single parameterized statement.
"""
import logging
from typing import Any, Dict, List, Optional, Sequence, Type, TypeVar
from pydantic import BaseModel, ValidationError
from sqlalchemy import text
from sqlalchemy.engine import Row

from .database import DatabaseManager, db_manager
from .exceptions import RecordMappingError
from .models import Admission, Doctor, Examination, Patient, Stay

logger = logging.getLogger(__name__)

RecordT = TypeVar('RecordT', bound=BaseModel)


class BaseRepository:
    """Shared query and row mapping helpers."""

    def __init__(self, db: Optional[DatabaseManager] = None):
        self.db = db or db_manager

    def _fetch_all(self, sql: str, params: Dict[str, Any]) -> Sequence[Row]:
        with self.db.get_connection() as conn:
            rows = conn.execute(text(sql), params).fetchall()
        logger.debug(f"{sql} {params} -> {len(rows)} row(s)")
        return rows

    def _fetch_one(self, sql: str, params: Dict[str, Any]) -> Optional[Row]:
        with self.db.get_connection() as conn:
            row = conn.execute(text(sql), params).first()
        logger.debug(f"{sql} {params} -> {'1 row' if row is not None else 'no rows'}")
        return row

    @staticmethod
    def _to_record(model: Type[RecordT], row: Row) -> RecordT:
        try:
            return model.model_validate(dict(row._mapping))
        except ValidationError as e:
            raise RecordMappingError(model.__name__, str(e)) from e


class PatientRepository(BaseRepository):
    """Access to the Patients table."""

    def get_patient(self, ssn: str) -> Optional[Patient]:
        row = self._fetch_one("SELECT * FROM Patients WHERE ssn = :ssn", {'ssn': ssn})
        if row is None:
            return None
        return self._to_record(Patient, row)


class DoctorRepository(BaseRepository):
    """Access to the Doctors table."""

    def get_doctor(self, doctor_id: int) -> Optional[Doctor]:
        row = self._fetch_one("SELECT * FROM Doctors WHERE id = :id", {'id': doctor_id})
        if row is None:
            return None
        return self._to_record(Doctor, row)


class AdmissionRepository(BaseRepository):
    """Access to the Admissions table."""

    def get_admission(self, admission_id: int) -> Optional[Admission]:
        row = self._fetch_one("SELECT * FROM Admissions WHERE id = :id", {'id': admission_id})
        if row is None:
            return None
        return self._to_record(Admission, row)

    def set_total_payment(self, admission_id: int, total_payment: float) -> bool:
        """
        Overwrite the total payment of an admission.

        Returns:
            True if a row was updated, False if no admission has that id
        """
        with self.db.get_connection() as conn:
            result = conn.execute(
                text("UPDATE Admissions SET total_payment = :total_payment WHERE id = :id"),
                {'total_payment': total_payment, 'id': admission_id}
            )
            conn.commit()
            updated = result.rowcount

        logger.info(f"Set total_payment={total_payment} on admission {admission_id} ({updated} row(s))")
        return updated > 0


class StayRepository(BaseRepository):
    """Access to the Stays table."""

    def get_stays_by_admission_id(self, admission_id: int) -> List[Stay]:
        rows = self._fetch_all(
            "SELECT * FROM Stays WHERE admission_id = :admission_id",
            {'admission_id': admission_id}
        )
        return [self._to_record(Stay, row) for row in rows]


class ExaminationRepository(BaseRepository):
    """Access to the Examinations table."""

    def get_examinations_by_admission_id(self, admission_id: int) -> List[Examination]:
        rows = self._fetch_all(
            "SELECT * FROM Examinations WHERE admission_id = :admission_id",
            {'admission_id': admission_id}
        )
        return [self._to_record(Examination, row) for row in rows]
