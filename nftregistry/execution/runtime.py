from datetime import datetime, timezone

import iso8601


class Context:
    """
    Who is invoking what. One Context belongs to one Executor; the executor
    sets it up before each invocation and resets it afterwards, so
    registries never see a caller left over from a previous call.
    """
    def __init__(self, base_state=None):
        self._base_state = base_state or {
            'this': None,
            'caller': None,
            'signer': None,
            'now': None
        }
        self._state = dict(self._base_state)

    def _set_up(self, sender, this, now=None):
        self._state = {
            'this': this,
            'caller': sender,
            'signer': sender,
            'now': parse_now(now)
        }

    def _reset(self):
        self._state = dict(self._base_state)

    @property
    def this(self):
        return self._state['this']

    @property
    def caller(self):
        return self._state['caller']

    @property
    def signer(self):
        return self._state['signer']

    @property
    def now(self):
        return self._state['now']


def parse_now(now=None):
    if now is None:
        return datetime.now(timezone.utc)

    if isinstance(now, datetime):
        return now

    return iso8601.parse_date(now)
