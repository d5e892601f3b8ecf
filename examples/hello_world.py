"""
time_capsule — Hello World

Messages are addressed to a point in logical time and only become
readable once the contract's clock gets there. Only the owner moves
the clock.
"""

import asyncio

from time_capsule import TimeCapsuleContract

OWNER = "ST1PQHQKV0RJXZFY1DGX8MNSNYVE3VGZJSRTPGZGM"
STRANGER = "ST2CY5V39NHDPWSXMW9QDT3HC3GD6Q6XX4CFRK9AG"


def report(label, result) -> None:
    if result.success:
        print(f"  {label}: ok -> {result.value}")
    else:
        print(f"  {label}: rejected ({result.reason})")


async def main():
    # ──────────────────────────────────────
    #  1. Create the contract
    # ──────────────────────────────────────
    contract = TimeCapsuleContract(OWNER)

    # ──────────────────────────────────────
    #  2. Send a message to the future
    # ──────────────────────────────────────
    print("=== Sending ===\n")

    sent = await contract.send_message(OWNER, "Hello from the past!", 100)
    report("send", sent)
    report("send empty", await contract.send_message(OWNER, "", 100))
    report("send to t=-101", await contract.send_message(OWNER, "Paradox incoming!", -101))

    # ──────────────────────────────────────
    #  3. Not readable yet
    # ──────────────────────────────────────
    print("\n=== Before target time ===\n")

    view = (await contract.get_message(sent.value)).value
    print(f"  available: {view.is_available}")

    # ──────────────────────────────────────
    #  4. Only the owner moves time
    # ──────────────────────────────────────
    print("\n=== Advancing time ===\n")

    report("stranger advances", await contract.advance_time(STRANGER, 100))
    report("owner advances", await contract.advance_time(OWNER, 100))

    view = (await contract.get_message(sent.value)).value
    print(f"  available: {view.is_available}  content: {view.content!r}")

    print("\nContract JSON: ", await contract.export())


if __name__ == "__main__":
    asyncio.run(main())
