#!/usr/bin/env python3
"""
Score a resume against a job description.

Usage:
    python scripts/score_resume.py analyze resume.txt job.txt
    python scripts/score_resume.py analyze resume.pdf job.md --json
    python scripts/score_resume.py vocabulary --category technical
"""

from atsmatch.cli import app

if __name__ == "__main__":
    app()
