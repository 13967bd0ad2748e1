import httpx
import asyncio
import os

PORT = os.environ.get("RELAY_PORT", "8001")

async def verify_relay():
    url = f"http://127.0.0.1:{PORT}/"
    params = {"artist": "Adele", "song": "Hello"}

    print(f"Sending request to {url} with {params}...")
    try:
        async with httpx.AsyncClient(trust_env=False) as client:
            preflight = await client.options(url)
            print(f"Pre-flight Status Code: {preflight.status_code}")

            response = await client.get(url, params=params, timeout=30.0)
            print(f"Status Code: {response.status_code}")
            if response.status_code == 200:
                data = response.json()
                synced = data.get("syncedLyrics") or ""
                print(f"Synced lines: {len(synced.splitlines())}")
                print(f"Has plain lyrics: {bool(data.get('plainLyrics'))}")
            else:
                print(f"Error Response: {response.text}")
    except Exception as e:
        print(f"Request Failed: {e}")

if __name__ == "__main__":
    asyncio.run(verify_relay())
