"""Bake & Taste Load Testing: Locust entry point.

Usage:
    # All scenarios (web UI):
    locust -f loadtests/locustfile.py --host http://localhost:8000

    # Mixed workload only, headless (CI mode):
    locust -f loadtests/locustfile.py MarketplaceUser --headless \
           -u 50 -r 5 -t 300s --csv=results/loadtest
"""

import logging
import time

import requests
from locust import events

# Import all user classes so Locust discovers them
from loadtests.helpers.response import extract_error_detail
from loadtests.scenarios.marketplace import CustomerSurgeUser, MarketplaceUser  # noqa: F401

logger = logging.getLogger("loadtest")


@events.request.add_listener
def on_request(request_type, name, response, exception, **_kw):
    """Log error details for every failed request."""
    if exception:
        logger.error("[EXCEPTION] %s %s: %s", request_type, name, exception)
    elif response is not None and response.status_code >= 400:
        detail = extract_error_detail(response)
        logger.error("[%s] %s %s: %s", response.status_code, request_type, name, detail)


@events.test_start.add_listener
def on_test_start(environment, **_kwargs):
    """Check the target is up before users start."""
    print(f"\n[LOADTEST] Started at {time.strftime('%H:%M:%S')}")
    print(f"[LOADTEST] Target host: {environment.host}")
    try:
        resp = requests.get(f"{environment.host}/health", timeout=5)
        print(f"[LOADTEST] Health: {resp.status_code} {resp.text}")
    except requests.RequestException as e:
        print(f"[LOADTEST] Health check failed: {e}")
    print()


@events.test_stop.add_listener
def on_test_stop(**_kwargs):
    print(f"\n[LOADTEST] Stopped at {time.strftime('%H:%M:%S')}\n")
