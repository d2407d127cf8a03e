#!/usr/bin/env python3
"""
Send randomized support requests to the AssistIQ /chat endpoint.

Examples:
  python send_sample_ticket.py --endpoint http://localhost:3000/chat --n 5
  python send_sample_ticket.py --endpoint https://<your-ngrok>/chat --n 10 --anonymous-prob 0.3
"""

import argparse
import random
import time

import requests

NAMES = ["Alice", "Bob", "Carol", "Dmitri", "Priya"]
PRODUCTS = ["mobile app", "billing page", "dashboard", "export tool"]
PROBLEMS = [
    "keeps logging me out",
    "shows the wrong invoice total",
    "is very slow since yesterday",
    "returns an error when I click save",
]


def make_payload(anonymous_prob: float) -> dict:
    payload = {
        "message": f"The {random.choice(PRODUCTS)} {random.choice(PROBLEMS)}. Can you help?",
    }
    # omitted names exercise the "Guest" default
    if random.random() >= anonymous_prob:
        payload["name"] = random.choice(NAMES)
    return payload


def main():
    ap = argparse.ArgumentParser()
    ap.add_argument("--endpoint", required=True, help="AssistIQ POST /chat endpoint")
    ap.add_argument("--n", type=int, default=5, help="how many requests to send")
    ap.add_argument("--anonymous-prob", type=float, default=0.2,
                    help="probability that the name is left out (default 0.2)")
    ap.add_argument("--timeout", type=float, default=30.0)
    args = ap.parse_args()

    ok = 0
    for i in range(args.n):
        payload = make_payload(args.anonymous_prob)
        try:
            r = requests.post(args.endpoint, json=payload, timeout=args.timeout)
            try:
                resp = r.json()
            except ValueError:
                resp = {"raw": r.text}

            # {"ticketId": ..., "reply": "..."} on success, {"error": "..."} otherwise
            print(f"[{i+1}/{args.n}] SENT name={payload.get('name', '<none>')} "
                  f"-> HTTP {r.status_code}, resp={str(resp)[:120]}")
            if r.ok:
                ok += 1
        except requests.RequestException as e:
            print(f"[{i+1}/{args.n}] ERROR: {e}")

        time.sleep(0.2)

    print(f"\nDone. Sent OK: {ok}/{args.n}")


if __name__ == "__main__":
    main()
