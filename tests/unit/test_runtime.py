from unittest import TestCase
from datetime import datetime, timezone
from nftregistry.execution.runtime import Context, parse_now
import iso8601


class TestContext(TestCase):
    def test_base_state_is_empty(self):
        ctx = Context()

        self.assertIsNone(ctx.caller)
        self.assertIsNone(ctx.signer)
        self.assertIsNone(ctx.this)
        self.assertIsNone(ctx.now)

    def test_set_up(self):
        ctx = Context()
        ctx._set_up(sender='stu', this='registry', now='2026-10-19T12:00:00Z')

        self.assertEqual(ctx.caller, 'stu')
        self.assertEqual(ctx.signer, 'stu')
        self.assertEqual(ctx.this, 'registry')
        self.assertEqual(ctx.now, datetime(2026, 10, 19, 12, tzinfo=timezone.utc))

    def test_reset(self):
        ctx = Context()
        ctx._set_up(sender='stu', this='registry')
        ctx._reset()

        self.assertIsNone(ctx.caller)
        self.assertIsNone(ctx.this)

    def test_contexts_are_independent(self):
        a = Context()
        b = Context()

        a._set_up(sender='stu', this='registry')

        self.assertIsNone(b.caller)


class TestParseNow(TestCase):
    def test_defaults_to_current_utc_time(self):
        now = parse_now()

        self.assertEqual(now.tzinfo, timezone.utc)

    def test_passes_datetimes_through(self):
        d = datetime(2020, 1, 1)

        self.assertIs(parse_now(d), d)

    def test_parses_iso_strings(self):
        self.assertEqual(parse_now('2020-01-01T00:00:00+00:00'), datetime(2020, 1, 1, tzinfo=timezone.utc))

    def test_bad_string_raises(self):
        with self.assertRaises(iso8601.ParseError):
            parse_now('yesterday')
