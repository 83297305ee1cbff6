import sqlite3
import pytest

from hospital_records.database import DatabaseManager, db_manager

SCHEMA = """
CREATE TABLE Patients (
  ssn TEXT PRIMARY KEY,
  first_name TEXT,
  last_name TEXT,
  address TEXT,
  phone TEXT
);
CREATE TABLE Doctors (
  id INTEGER PRIMARY KEY,
  gender INTEGER,
  specialty TEXT,
  first_name TEXT,
  last_name TEXT
);
CREATE TABLE Admissions (
  id INTEGER PRIMARY KEY,
  patient_ssn TEXT,
  admit_date DATE,
  leave_date DATE,
  total_payment REAL,
  insurance_payment REAL,
  future_visit_date DATE
);
CREATE TABLE Stays (
  admission_id INTEGER,
  room_number TEXT,
  start_date DATE,
  end_date DATE
);
CREATE TABLE Examinations (
  doctor_id INTEGER,
  admission_id INTEGER,
  comment_text TEXT
);
"""

SEED = """
INSERT INTO Patients VALUES ('111-22-3333', 'Ada', 'Lovelace', '12 Elm St, Worcester', '508-555-0101');
INSERT INTO Patients VALUES ('999-00-0000', NULL, 'Broken', NULL, NULL);

INSERT INTO Doctors VALUES (1, 0, 'Cardiology', 'Grace', 'Hopper');
INSERT INTO Doctors VALUES (2, 1, 'Neurology', 'Alan', 'Turing');
INSERT INTO Doctors VALUES (3, 7, NULL, 'Pat', 'Unknown');
INSERT INTO Doctors VALUES (4, 1, 'Surgery', NULL, 'Broken');

INSERT INTO Admissions VALUES (10, '111-22-3333', '2024-03-01', '2024-03-09', 1500.0, 1200.0, '2024-04-01');
INSERT INTO Admissions VALUES (11, '111-22-3333', '2024-05-02', NULL, 300.0, NULL, NULL);
INSERT INTO Admissions VALUES (99, '111-22-3333', NULL, NULL, 10.0, NULL, NULL);

INSERT INTO Stays VALUES (10, '101A', '2024-03-01', '2024-03-04');
INSERT INTO Stays VALUES (10, '202B', '2024-03-04', '2024-03-09');
INSERT INTO Stays VALUES (11, '303C', '2024-05-02', NULL);
INSERT INTO Stays VALUES (99, '404D', 'not-a-date', NULL);

INSERT INTO Examinations VALUES (1, 10, 'Stable after surgery');
INSERT INTO Examinations VALUES (2, 10, NULL);
INSERT INTO Examinations VALUES ('abc', 99, 'bad doctor id');
"""


@pytest.fixture()
def db_path(tmp_path):
    path = tmp_path / "hospital_test.db"
    conn = sqlite3.connect(str(path))
    try:
        conn.executescript(SCHEMA)
        conn.executescript(SEED)
        conn.commit()
    finally:
        conn.close()
    return path


@pytest.fixture()
def db_url(db_path):
    return f"sqlite:///{db_path}"


@pytest.fixture()
def db(db_url):
    """The shared db_manager, pointed at the temp database for one test."""
    db_manager.initialize(database_url=db_url)
    yield db_manager
    db_manager.close()


@pytest.fixture()
def fresh_db(db_url):
    """A separate manager for checking what a command wrote."""
    manager = DatabaseManager()
    manager.initialize(database_url=db_url)
    yield manager
    manager.close()
