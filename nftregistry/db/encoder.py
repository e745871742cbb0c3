import json

# Registry state is only identities and timestamps (str) and counts (int), all of which survive a JSON round trip.


def encode(value):
    return json.dumps(value, separators=(',', ':'))


def decode(data):
    if data is None:
        return None

    return json.loads(data)
