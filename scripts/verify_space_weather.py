import httpx
import time
import sys
import subprocess
import os

BASE_URL = "http://127.0.0.1:8000"
API_URL = f"{BASE_URL}/api/v1/space-weather"

def check_backend():
    try:
        r = httpx.get(f"{BASE_URL}/health", timeout=2)
        return r.status_code == 200
    except httpx.HTTPError:
        return False

def start_backend():
    print("Starting temporary backend...")
    p = subprocess.Popen([sys.executable, "-m", "uvicorn", "spacedatahub.main:app", "--host", "0.0.0.0", "--port", "8000"],
                         cwd=os.path.join(os.getcwd(), "backend"),
                         stdout=subprocess.PIPE,
                         stderr=subprocess.PIPE)
    for i in range(20):
        if check_backend():
            print("Backend started.")
            return p
        time.sleep(1)
    print("Backend failed to start.")
    return None

def verify_events():
    print("Requesting all DONKI event categories...")
    start_time = time.time()
    r = httpx.get(f"{API_URL}/events", timeout=120)
    duration = time.time() - start_time

    if r.status_code != 200:
        print(f"Failed: Status {r.status_code}")
        print(r.text)
        return

    print(f"Fetched in {duration:.2f}s")
    for category, events in r.json().items():
        if events is None:
            print(f"  {category:25} unavailable")
        else:
            print(f"  {category:25} {len(events)} events")

def verify_impact(target):
    print(f"\nRequesting impact analysis for {target}...")
    r = httpx.get(f"{API_URL}/impact/{target}", timeout=60)
    if r.status_code != 200:
        print(f"Failed: Status {r.status_code}")
        print(r.text)
        return

    verdict = r.json()
    print(f"  {verdict['summary']}")
    if verdict["is_impact"]:
        print(f"  Kind:    {verdict['analysis_kind']}")
        print(f"  Arrival: {verdict['arrival_time']} ({verdict['hours_until_arrival']} h)")
        print(f"  Speed:   {verdict.get('source_speed_km_s')} km/s")
        if verdict["hours_until_arrival"] < 0:
            print("  [FAIL] Arrival is in the past.")

if __name__ == "__main__":
    server_process = None
    if not check_backend():
        server_process = start_backend()

    if check_backend():
        verify_events()
        for target in ("Moon", "Mars"):
            verify_impact(target)
    else:
        print("Could not connect to backend.")

    if server_process:
        print("Stopping temporary backend...")
        server_process.terminate()
