import json
import logging
import os
import sys

import requests
from requests.adapters import HTTPAdapter
from urllib3.util.retry import Retry

# Run from the repository root: python scripts/fetch_results.py STU001
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from standing.config import DATA_DIR, configure_logging
from standing.data import ResultParser

# --- CONFIGURATION ---
SUPABASE_URL = os.environ.get("SUPABASE_URL", "")
SUPABASE_ANON_KEY = os.environ.get("SUPABASE_ANON_KEY", "")

RESULTS_TABLE = "results"
STUDENTS_TABLE = "students"
RESULT_COLUMNS = "session,semester,courseCode,courseTitle,units,score,grade"
# ---------------------

logger = logging.getLogger("fetch_results")


def create_retry_session():
    session = requests.Session()
    retries = Retry(
        total=5,
        backoff_factor=1,
        status_forcelist=[429, 500, 502, 503, 504],
        allowed_methods=["GET"]
    )
    adapter = HTTPAdapter(max_retries=retries)
    session.mount("https://", adapter)
    session.headers.update({
        "apikey": SUPABASE_ANON_KEY,
        "Authorization": f"Bearer {SUPABASE_ANON_KEY}",
        "Accept": "application/json",
    })
    return session


def fetch_rows(session, table, params):
    """GET rows from a PostgREST table; raises for HTTP errors."""
    url = f"{SUPABASE_URL.rstrip('/')}/rest/v1/{table}"
    resp = session.get(url, params=params, timeout=15)
    resp.raise_for_status()
    return resp.json()


def run(student_id):
    if not SUPABASE_URL or not SUPABASE_ANON_KEY:
        logger.error("SUPABASE_URL and SUPABASE_ANON_KEY must be set")
        return 1

    session = create_retry_session()

    try:
        students = fetch_rows(session, STUDENTS_TABLE, {"id": f"eq.{student_id}", "select": "*"})
        results = fetch_rows(session, RESULTS_TABLE, {
            "studentId": f"eq.{student_id}",
            "select": RESULT_COLUMNS,
        })
    except requests.RequestException as e:
        logger.error("Fetch failed for %s: %s", student_id, e)
        return 1

    if not students:
        logger.error("No student found with id %s", student_id)
        return 1

    transcript = {"student": students[0], "results": results}

    # Parse once so bad rows show up now rather than at display time
    state = ResultParser().parse(transcript)
    logger.info(
        "%s: %d results, %d rejected", student_id, len(state["records"]), len(state["rejected"])
    )

    filename = os.path.join(DATA_DIR, f"transcript_{student_id}.json")
    with open(filename, "w", encoding="utf-8") as f:
        json.dump(transcript, f, indent=4)
    logger.info("Saved %s", filename)
    return 0


if __name__ == "__main__":
    configure_logging("INFO")
    if len(sys.argv) != 2:
        print("Usage: python scripts/fetch_results.py <student_id>")
        sys.exit(2)
    sys.exit(run(sys.argv[1]))
