"""
Hospital Records - query and update a hospital records database from the command line.
"""
from .models import Admission, Doctor, Examination, Gender, Patient, Stay
from .repository import (
    AdmissionRepository,
    DoctorRepository,
    ExaminationRepository,
    PatientRepository,
    StayRepository,
)

__all__ = [
    'Admission',
    'Doctor',
    'Examination',
    'Gender',
    'Patient',
    'Stay',
    'AdmissionRepository',
    'DoctorRepository',
    'ExaminationRepository',
    'PatientRepository',
    'StayRepository',
]
