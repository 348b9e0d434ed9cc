"""Post a sample Vapi tool-call batch to a running webhook server.

Usage:
    python scripts/send_sample_batch.py [base_url]

Sends one log_health_status call with string-encoded arguments and one with
decoded arguments, then prints the response. Appends two real rows when the
server is configured against a live spreadsheet.
"""

import asyncio
import json
import logging
import sys

import httpx

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

SAMPLE_ARGS = {
    "patientName": "Test Patient",
    "patientPhone": "+15550000000",
    "symptoms": ["mild headache"],
    "mood": "good",
    "notes": "Sample batch from send_sample_batch.py",
}


async def main(base_url: str) -> int:
    body = {
        "message": {
            "type": "tool-calls",
            "toolCallList": [
                {
                    "id": "sample-1",
                    "function": {"name": "log_health_status", "arguments": json.dumps(SAMPLE_ARGS)},
                },
                {
                    "id": "sample-2",
                    "function": {"name": "log_health_status", "arguments": SAMPLE_ARGS},
                },
            ],
        }
    }
    async with httpx.AsyncClient(timeout=60.0) as http:
        health = await http.get(f"{base_url}/health")
        logger.info("Health: %s %s", health.status_code, health.json())

        resp = await http.post(f"{base_url}/tool/log_health_status", json=body)
        logger.info("Status: %s", resp.status_code)
        print(json.dumps(resp.json(), indent=2))
    return 0 if resp.is_success else 1


if __name__ == "__main__":
    url = sys.argv[1] if len(sys.argv) > 1 else "http://localhost:3000"
    sys.exit(asyncio.run(main(url.rstrip("/"))))
