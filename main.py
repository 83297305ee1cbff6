#!/usr/bin/env python3
"""
Main entry point for the hospital records CLI.
"""
from hospital_records.cli import cli

if __name__ == '__main__':
    cli()
