"""
Configuration for the hospital records CLI.
"""
import os
from dotenv import load_dotenv

# Load environment variables
load_dotenv('.hospital.env')

LOG_LEVELS = ('DEBUG', 'INFO', 'WARNING', 'ERROR')


class RecordsConfig:
    """Environment-backed configuration."""

    def __init__(self):
        # SQLAlchemy URL of the hospital database
        self.database_url = os.getenv('HOSPITAL_DB_URL') or 'postgresql://localhost:5432/hospital'

        # Credentials, applied over whatever the URL carries
        self.username = os.getenv('HOSPITAL_DB_USER')
        self.password = os.getenv('HOSPITAL_DB_PASSWORD')

        self.log_level = (os.getenv('HOSPITAL_LOG_LEVEL') or 'WARNING').upper()

        # Optional log file; nothing is written to disk when unset
        self.log_file = os.getenv('HOSPITAL_LOG_FILE')

    def validate(self) -> bool:
        """Validate configuration."""
        if not self.database_url:
            raise ValueError("HOSPITAL_DB_URL must not be empty")

        if self.log_level not in LOG_LEVELS:
            raise ValueError(f"HOSPITAL_LOG_LEVEL must be one of {', '.join(LOG_LEVELS)}")

        return True
