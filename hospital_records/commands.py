"""
Command handlers for the hospital records CLI.

Each handler takes its key as an optional argument and prompts for it on
standard input when it is missing. Database and row mapping errors are left
to the caller.
"""
import logging
from typing import Callable, Dict, Optional, Tuple
import click

from .exceptions import CommandNotFoundError
from .repository import (
    AdmissionRepository,
    DoctorRepository,
    ExaminationRepository,
    PatientRepository,
    StayRepository,
)

logger = logging.getLogger(__name__)


def _show(value) -> str:
    return "N/A" if value is None else str(value)


def find_patient_info(ssn: Optional[str] = None):
    """Report a patient's basic information."""
    if ssn is None:
        ssn = click.prompt("Enter Patient SSN", type=str)

    patient = PatientRepository().get_patient(ssn)
    if patient is None:
        click.echo("Couldn't find patient")
        return

    click.echo(f"Patient SSN: {patient.ssn}")
    click.echo(f"Patient First Name: {patient.first_name}")
    click.echo(f"Patient Last Name: {patient.last_name}")
    click.echo(f"Patient Address: {_show(patient.address)}")


def find_doctor_info(doctor_id: Optional[int] = None):
    """Report a doctor's basic information."""
    if doctor_id is None:
        doctor_id = click.prompt("Enter Doctor ID", type=int)

    doctor = DoctorRepository().get_doctor(doctor_id)
    if doctor is None:
        click.echo("Unable to find doctor", err=True)
        return

    click.echo(f"Doctor ID: {doctor.id}")
    click.echo(f"Doctor First Name: {doctor.first_name}")
    click.echo(f"Doctor Last Name: {doctor.last_name}")
    click.echo(f"Doctor Gender: {_show(doctor.gender)}")


def find_admission_info(admission_id: Optional[int] = None):
    """Report an admission with the rooms it used and the doctors who examined the patient."""
    if admission_id is None:
        admission_id = click.prompt("Enter Admission ID", type=int)

    admission = AdmissionRepository().get_admission(admission_id)
    if admission is None:
        click.echo("Unable to find admission", err=True)
        return

    stays = StayRepository().get_stays_by_admission_id(admission_id)
    examinations = ExaminationRepository().get_examinations_by_admission_id(admission_id)

    click.echo(f"Admission ID: {admission.id}")
    click.echo(f"Patient SSN: {admission.patient_ssn}")
    click.echo(f"Admission date (start date): {admission.admit_date}")
    click.echo(f"Total Payment: {admission.total_payment}")
    click.echo("Rooms:")
    for stay in stays:
        click.echo(f"\tRoom Num: {stay.room_number} FromDate: {stay.start_date} ToDate: {_show(stay.end_date)}")

    click.echo("Doctors examined the patient in this admission:")
    for examination in examinations:
        click.echo(f"\tDoctor ID: {examination.doctor_id}")


def update_admission_payment(admission_id: Optional[int] = None, total_payment: Optional[float] = None):
    """Overwrite the total payment of an existing admission."""
    if admission_id is None:
        admission_id = click.prompt("Enter Admission Number", type=int)

    admissions = AdmissionRepository()
    if admissions.get_admission(admission_id) is None:
        click.echo("Unable to find admission with that ID", err=True)
        return

    if total_payment is None:
        total_payment = click.prompt("Enter the new total payment", type=float)

    if admissions.set_total_payment(admission_id, total_payment):
        click.echo(f"Total payment for admission {admission_id} set to {total_payment}")
    else:
        # Row vanished between the lookup and the update
        click.echo("Unable to find admission with that ID", err=True)


COMMANDS: Dict[int, Tuple[str, Callable[[], None]]] = {
    1: ("Report Patients Basic Information", find_patient_info),
    2: ("Report Doctors Basic Information", find_doctor_info),
    3: ("Report Admissions Information", find_admission_info),
    4: ("Update Admissions Payment", update_admission_payment),
}


def print_menu():
    for selector, (description, _) in COMMANDS.items():
        click.echo(f"{selector}- {description}")


def run_command(selector: int):
    """Run the handler registered for a menu selector."""
    try:
        description, handler = COMMANDS[selector]
    except KeyError:
        raise CommandNotFoundError(selector) from None

    logger.info(f"Running command {selector}: {description}")
    handler()
