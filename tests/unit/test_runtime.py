import asyncio
import unittest

from uadetect.detection.engine import DetectionEngine
from uadetect.models import BrowserName, ClientEnvironment, DetectionMethod, StructuredHints, UseOptions
from uadetect.runtime import AgentSession

CHROME = (
    "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 (KHTML, like Gecko) "
    "Chrome/120.0.0.0 Safari/537.36"
)
FIREFOX = "Mozilla/5.0 (X11; Linux x86_64; rv:121.0) Gecko/20100101 Firefox/121.0"


class MutableEnvironment:
    def __init__(self, environment):
        self.environment = environment

    def __call__(self):
        return self.environment


class TestAgentSession(unittest.TestCase):
    def test_listeners_hear_only_changes(self):
        accessor = MutableEnvironment(ClientEnvironment(user_agent=CHROME))
        session = AgentSession(environment=accessor)
        seen = []
        session.subscribe(seen.append)

        first = session.refresh()
        self.assertEqual(first.browser.name, BrowserName.CHROME)
        self.assertEqual(len(seen), 1)

        # Same environment, equal result: the held snapshot is kept and nobody is notified.
        again = session.refresh()
        self.assertIs(again, first)
        self.assertEqual(len(seen), 1)

        accessor.environment = ClientEnvironment(user_agent=FIREFOX)
        changed = session.refresh()
        self.assertEqual(changed.browser.name, BrowserName.FIREFOX)
        self.assertEqual(len(seen), 2)
        self.assertIs(session.result, changed)

    def test_unsubscribe_and_failing_listener(self):
        accessor = MutableEnvironment(ClientEnvironment(user_agent=CHROME))
        session = AgentSession(environment=accessor)
        seen = []

        def broken(result):
            raise RuntimeError("listener down")

        session.subscribe(broken)
        unsubscribe = session.subscribe(seen.append)
        with self.assertLogs("uadetect.runtime", level="ERROR"):
            session.refresh()
        self.assertEqual(len(seen), 1)

        unsubscribe()
        unsubscribe()
        accessor.environment = ClientEnvironment(user_agent=FIREFOX)
        session.refresh()
        self.assertEqual(len(seen), 1)

    def test_no_environment_session(self):
        session = AgentSession()
        self.assertIsNone(session.result)
        self.assertEqual(session.refresh().detection_method, DetectionMethod.NO_ENVIRONMENT)

    def test_refresh_async_uses_session_options(self):
        def source(hints):
            return {"fullVersion": "120.0.6099.130"}

        hints = StructuredHints.from_mapping(
            {"brands": [{"brand": "Google Chrome", "version": "120"}], "platform": "Windows", "detail_source": source}
        )
        engine = DetectionEngine(ClientEnvironment(hints=hints))
        session = AgentSession(engine, options=UseOptions(high_detail=True))
        seen = []
        session.subscribe(seen.append)

        low = session.refresh()
        self.assertIsNone(low.browser.full_version)
        high = asyncio.run(session.refresh_async())
        self.assertEqual(high.browser.full_version, "120.0.6099.130")
        self.assertEqual(len(seen), 2)


if __name__ == "__main__":
    unittest.main()
