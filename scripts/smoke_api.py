#!/usr/bin/env python3
"""Smoke check for a running booking API."""

import sys
from datetime import date, timedelta

import httpx


BASE_URL = "http://127.0.0.1:8000"


def check_store_hours(client: httpx.Client) -> None:
    print("=" * 60)
    print("GET /api/store-hours")
    print("=" * 60)
    response = client.get("/api/store-hours")
    response.raise_for_status()
    data = response.json()
    print(f"Default: {data['defaultHours']}")
    print(f"Overrides: {len(data['dailyStoreHours'])}")


def check_booking_flow(client: httpx.Client, day: str) -> str | None:
    print("\n" + "=" * 60)
    print(f"POST /api/available-slots + /api/book for {day}")
    print("=" * 60)

    response = client.post("/api/available-slots", json={"date": day, "services": ["Haircut"]})
    response.raise_for_status()
    slots = response.json()
    print(f"{len(slots)} slots available")
    if not slots:
        print("No slots, skipping booking")
        return None

    slot = slots[0]
    payload = {
        "date": day,
        "startTime": slot["startTime"],
        "endTime": slot["endTime"],
        "name": "Smoke Test",
        "phone": "555-0000",
        "email": "smoke@example.com",
        "services": ["Haircut"],
    }
    try:
        response = client.post("/api/book", json=payload)
        response.raise_for_status()
    except httpx.HTTPStatusError as e:
        print(f"HTTP Error: {e.response.status_code}")
        print(f"Response: {e.response.text}")
        return None

    body = response.json()
    print(f"Booked {body['booking']['id']} at {slot['startTime']}-{slot['endTime']}")
    print(f"Notification: {body['notification']}")

    again = client.post("/api/book", json=payload)
    print(f"Double booking rejected with {again.status_code}")
    return body["booking"]["id"]


def cleanup(client: httpx.Client, booking_id: str) -> None:
    response = client.delete(f"/api/booking/{booking_id}")
    print(f"\nDeleted {booking_id}: {response.status_code}")


def main():
    base_url = sys.argv[1] if len(sys.argv) > 1 else BASE_URL
    client = httpx.Client(base_url=base_url, timeout=10.0)

    try:
        client.get("/health").raise_for_status()
        print("Server is running\n")
    except Exception:
        print("Server is not running!")
        print("   Please start it with: uvicorn salon_booking.main:app --reload")
        sys.exit(1)

    check_store_hours(client)
    booking_id = check_booking_flow(client, (date.today() + timedelta(days=1)).isoformat())
    if booking_id:
        cleanup(client, booking_id)

    print("\n" + "=" * 60)
    print("Smoke check complete")
    print("=" * 60 + "\n")


if __name__ == "__main__":
    main()
