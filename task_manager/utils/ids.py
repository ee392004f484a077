import os
import time


def new_object_id() -> str:
    """
    Generate a 24 hex character identifier.

    The first 4 bytes are the creation time in seconds, the remaining 8 are
    random, so identifiers sort roughly by creation time.
    """
    timestamp = int(time.time()).to_bytes(4, "big")
    return (timestamp + os.urandom(8)).hex()
