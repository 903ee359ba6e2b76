"""
Data Loader Script - posts the sample students to a running API.

Sends each entry of SAMPLE_STUDENTS to POST /api/students and prints a
summary. Useful when the server runs with SEED_SAMPLE_DATA=false.

Usage:
    python load_data.py                              # Uses default URL
    python load_data.py http://localhost:8000         # Custom API URL
    python load_data.py http://backend:8000           # Inside Docker network
"""

import os
import sys

import httpx

from student_tracker.seed import SAMPLE_STUDENTS


def post_student(client, url, data):
    """POST one student; returns (status_code, body)."""
    resp = client.post(url, json=data)
    try:
        body = resp.json()
    except ValueError:
        body = {"detail": resp.text}
    return resp.status_code, body


def main():
    api_url = sys.argv[1] if len(sys.argv) > 1 else os.getenv("API_URL", "http://localhost:8000")
    students_url = f"{api_url}/api/students"

    print(f"Found {len(SAMPLE_STUDENTS)} students to load")
    print(f"Sending to: {students_url}")
    print()

    created = 0
    rejected = 0
    with httpx.Client(timeout=30.0) as client:
        for data in SAMPLE_STUDENTS:
            name = f"{data['firstName']} {data['lastName']}"
            try:
                status, body = post_student(client, students_url, data)
            except httpx.HTTPError as e:
                print(f"Error: could not reach {students_url}: {e}")
                sys.exit(1)

            if status == 201:
                created += 1
                print(f"  ✅ {name}: id {body.get('studentId')} (phone {body.get('phone')})")
            else:
                rejected += 1
                detail = body.get("detail")
                if isinstance(detail, dict):
                    reasons = "; ".join(e["message"] for e in detail.get("errors", []))
                else:
                    reasons = str(detail)
                print(f"  ❌ {name}: HTTP {status} ({reasons})")

    print()
    print("=" * 60)
    print("LOAD SUMMARY")
    print("=" * 60)
    print(f"  Created:   {created}")
    print(f"  Rejected:  {rejected}")
    print("=" * 60)

    if rejected:
        sys.exit(1)


if __name__ == "__main__":
    main()
