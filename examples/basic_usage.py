#!/usr/bin/env python3
"""
Basic usage example for the Poof SDK.

This example demonstrates:
1. Checking account credits
2. Removing the background from an image
3. Saving the result
"""

import os
import sys
from poof import Poof, PoofError, PaymentRequiredError


def main():
    """Run basic usage example."""
    # Get API key from environment
    api_key = os.getenv("POOF_API_KEY")
    if not api_key:
        print("Please set POOF_API_KEY environment variable")
        return

    if len(sys.argv) < 2:
        print("Usage: basic_usage.py <image> [output]")
        return

    input_path = sys.argv[1]
    output_path = sys.argv[2] if len(sys.argv) > 2 else "output.png"

    # Initialize client
    poof = Poof(api_key)

    # Check credits
    print("Checking account...")
    account = poof.me()
    print(f"Plan: {account.plan}")
    print(f"Credits: {account.used_credits}/{account.max_credits}")

    print(f"Removing background: {input_path}")
    try:
        result = poof.remove_background(input_path, {"format": "png", "crop": True})
    except PaymentRequiredError:
        print("Not enough credits for this example")
        return
    except PoofError as e:
        print(f"Failed ({e.code}): {e} [request id: {e.request_id}]")
        return

    result.save(output_path)
    meta = result.metadata
    print(f"Saved {meta.width}x{meta.height} {meta.content_type} to {output_path}")
    print(f"Processing time: {meta.processing_time_ms} ms")


if __name__ == "__main__":
    main()
