
import json, os, sys
import requests

BASE = os.getenv("VERIFIER_URL", "http://127.0.0.1:3000")

samples = [
    ({"platform": "web", "integrityToken": "long-enough-token", "deviceKey": "demo-device", "nonce": "n1"}, {}),
    ({"platform": "web", "integrityToken": "long-enough-token", "deviceKey": "demo-device", "nonce": "n2"}, {"x-mock-attestation": "true"}),
    ({"platform": "ios", "integrityToken": "apple-xyz", "deviceKey": "demo-device", "nonce": "n3"}, {}),
    ({"platform": "android", "integrityToken": "unknown", "deviceKey": "demo-device", "nonce": "n4"}, {}),
    ({"platform": "web", "integrityToken": "", "deviceKey": "demo-device", "nonce": "n5"}, {}),
]

health = requests.get(BASE + "/health", timeout=5)
print("Health:", health.status_code, json.dumps(health.json()))

for body, headers in samples:
    resp = requests.post(BASE + "/verify", json=body, headers=headers, timeout=5)
    print(body["platform"], headers or "", "->", resp.status_code, json.dumps(resp.json(), indent=2))

sys.exit(0 if health.status_code == 200 else 1)
