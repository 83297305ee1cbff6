"""
Pydantic models for hospital records.
Field names follow the table columns so result rows map onto records directly.
"""
from datetime import date, datetime, time
from decimal import Decimal
from enum import Enum
from typing import Optional
from pydantic import BaseModel, Field, field_validator


def _number_to_str(v):
    """Drivers may hand back numeric-looking text columns as numbers."""
    if isinstance(v, (int, Decimal)) and not isinstance(v, bool):
        return str(v)
    return v


def _datetime_to_date(v):
    """Midnight datetimes (Oracle DATE) become dates; other times are left for pydantic to reject."""
    if isinstance(v, datetime) and v.time() == time(0):
        return v.date()
    return v


class Gender(Enum):
    """Doctor gender, stored as an integer column."""
    FEMALE = 0
    MALE = 1

    @classmethod
    def from_int(cls, value) -> Optional['Gender']:
        """Map the stored integer to a Gender; unknown values map to None."""
        try:
            return cls(value)
        except ValueError:
            return None

    def __str__(self):
        return self.name.capitalize()


class Patient(BaseModel):
    """Model for a patient row."""
    ssn: str = Field(..., description="Social security number, the patient key")
    first_name: str
    last_name: str
    address: Optional[str] = None
    phone: Optional[str] = None

    @field_validator('ssn', mode='before')
    @classmethod
    def coerce_ssn(cls, v):
        return _number_to_str(v)


class Doctor(BaseModel):
    """Model for a doctor row."""
    id: int
    gender: Optional[Gender] = Field(None, description="Decoded from the integer gender column")
    specialty: Optional[str] = None
    first_name: str
    last_name: str

    @field_validator('gender', mode='before')
    @classmethod
    def decode_gender(cls, v):
        """Decode 0/1 into a Gender; anything unknown becomes None."""
        if isinstance(v, Gender):
            return v
        return Gender.from_int(v)


class Admission(BaseModel):
    """Model for an admission row."""
    id: int
    patient_ssn: str = Field(..., description="Foreign key to the patient")
    admit_date: date
    leave_date: Optional[date] = None
    total_payment: float
    insurance_payment: Optional[float] = None
    future_visit_date: Optional[date] = None

    @field_validator('patient_ssn', mode='before')
    @classmethod
    def coerce_patient_ssn(cls, v):
        return _number_to_str(v)

    @field_validator('admit_date', 'leave_date', 'future_visit_date', mode='before')
    @classmethod
    def truncate_dates(cls, v):
        return _datetime_to_date(v)


class Stay(BaseModel):
    """Model for a room stay within an admission."""
    admission_id: int
    room_number: str
    start_date: date
    end_date: Optional[date] = None

    @field_validator('room_number', mode='before')
    @classmethod
    def coerce_room_number(cls, v):
        return _number_to_str(v)

    @field_validator('start_date', 'end_date', mode='before')
    @classmethod
    def truncate_dates(cls, v):
        return _datetime_to_date(v)


class Examination(BaseModel):
    """Model for a doctor's examination during an admission."""
    doctor_id: int
    admission_id: int
    comment_text: Optional[str] = None
