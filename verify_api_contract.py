import json

import requests

from tracker_stats.schema import SnapshotFormatError, StatsSnapshot

# Config
API_URL = "http://127.0.0.1:8080"


def test_api_contract():
    print("Testing Snapshot Contract...")

    # 1. Health
    print("\n[1] Testing /health...")
    try:
        resp = requests.get(f"{API_URL}/health", timeout=5)
        resp.raise_for_status()
        print(f"✅ /health Response: {json.dumps(resp.json(), indent=2)}")
    except requests.RequestException as e:
        print(f"❌ /health Failed: {e}")
        return

    # 2. Snapshot
    print("\n[2] Testing /database.json...")
    try:
        resp = requests.get(f"{API_URL}/database.json", timeout=5)
        resp.raise_for_status()
        data = resp.json()
    except (requests.RequestException, ValueError) as e:
        print(f"❌ /database.json Failed: {e}")
        return

    required_fields = ['times', 'connections', 'completed']
    missing = [f for f in required_fields if f not in data]
    if missing:
        print(f"❌ Missing Fields: {missing}")
        return

    try:
        snapshot = StatsSnapshot.from_payload(data)
    except SnapshotFormatError as e:
        print(f"❌ Snapshot rejected: {e}")
        return

    print(f"✅ All Dashboard Contract Fields Present! ({len(snapshot)} entries)")


if __name__ == "__main__":
    test_api_contract()
