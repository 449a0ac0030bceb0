"""
Script to run a simulation on a running Lecture Sim server via REST API.
Make sure the server is running before executing this script.

Usage:
    python -m lecture_sim --serve
    python request_simulation.py [seed]
"""

import os
import sys

import requests


def _console_supports_utf8() -> bool:
    enc = getattr(sys.stdout, "encoding", None)
    return enc is not None and "utf" in enc.lower()


_OK_CHAR = "✓" if _console_supports_utf8() else "[OK]"
_FAIL_CHAR = "✗" if _console_supports_utf8() else "[FAIL]"


def _detect_base_url() -> str:
    """Determine a reachable BASE_URL.

    Priority: environment variable `LECTURE_SIM_BASE_URL`, then common local ports.
    If nothing responds, fall back to http://127.0.0.1:8000.
    """
    env = os.environ.get("LECTURE_SIM_BASE_URL")
    if env:
        return env

    candidates = [
        "http://127.0.0.1:8000",
        "http://localhost:8000",
        "http://127.0.0.1:8888",
    ]

    for c in candidates:
        try:
            resp = requests.get(f"{c}/health", timeout=0.5)
            if resp.status_code == 200:
                return c
        except requests.exceptions.RequestException:
            continue

    return candidates[0]


def check_server(base_url):
    """Check if the server is running."""
    try:
        response = requests.get(f"{base_url}/health", timeout=2)
        if response.status_code == 200:
            print(f"{_OK_CHAR} Server is running at {base_url}")
            return True
    except requests.exceptions.RequestException:
        pass
    print(f"{_FAIL_CHAR} Server is not running!")
    print("\nPlease start the server first:")
    print("  python -m lecture_sim --serve")
    return False


def request_simulation(base_url, seed=None):
    """Run a simulation remotely and return the response body."""
    data = {}
    if seed is not None:
        data["seed"] = seed
    try:
        response = requests.post(f"{base_url}/simulations", json=data, timeout=10)
        if response.status_code == 201:
            return response.json()
        print(f"{_FAIL_CHAR} Simulation request failed: {response.text}")
    except requests.exceptions.RequestException as e:
        print(f"{_FAIL_CHAR} Error requesting simulation: {e}")
    return None


def main():
    base_url = _detect_base_url()
    if not check_server(base_url):
        return 1

    seed = int(sys.argv[1]) if len(sys.argv) > 1 else None
    result = request_simulation(base_url, seed)
    if result is None:
        return 1

    for line in result["transcript"]:
        print(line)

    print("\n" + "=" * 60)
    counts = result["outcome_counts"]
    print(f"{_OK_CHAR} passed: {counts['passed']}, failed: {counts['failed']}, flagged: {counts['flagged']}")
    print("=" * 60)
    return 0


if __name__ == "__main__":
    try:
        sys.exit(main())
    except KeyboardInterrupt:
        print(f"\n\n{_FAIL_CHAR} Interrupted by user")
        sys.exit(1)
