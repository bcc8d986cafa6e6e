#!/usr/bin/env python3
"""Validate a kiosk policy file without starting the browser.

Prints the normalized policy as JSON on success, the error on failure.
"""

import argparse
import json
import sys

from seb_kiosk.adapters.config import PolicyLoader


def main() -> int:
    parser = argparse.ArgumentParser(description="Validate a seb-kiosk policy file.")
    parser.add_argument("config", help="Path to JSON configuration file")
    args = parser.parse_args()

    result = PolicyLoader.try_load(args.config)
    if not result.success or result.policy is None:
        print(f"{result.error_kind} error: {result.error_message}", file=sys.stderr)
        return 1

    policy = result.policy
    echo = policy.model_dump(by_alias=True)
    echo["allowedDomains"] = list(policy.allowed_domains)
    echo["effectiveClientVersion"] = policy.get_client_version()
    echo["effectiveClientType"] = policy.get_client_type()
    print(json.dumps(echo, indent=2))
    return 0


if __name__ == "__main__":
    sys.exit(main())
