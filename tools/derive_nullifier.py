#!/usr/bin/env python3
"""
Compute the nullifier for one or more device keys offline.

Usage:
    PYTHONPATH=. python tools/derive_nullifier.py <device_key> [<device_key> ...]

The salt is read from NULLIFIER_SALT exactly as the service reads it, so the
output matches what /verify returns for the same key.
"""

import argparse
import sys

from attestation_verifier.config import ConfigError, Settings
from attestation_verifier.nullifier import derive_nullifier


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(description="Derive attestation nullifiers")
    parser.add_argument("device_keys", nargs="+", help="Device key(s) to hash")
    args = parser.parse_args(argv)

    try:
        settings = Settings.from_env()
    except ConfigError as e:
        print(f"Configuration error: {e}", file=sys.stderr)
        return 2

    for key in args.device_keys:
        print(f"{key}\t{derive_nullifier(key, settings.nullifier_salt)}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
