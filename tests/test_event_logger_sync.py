import os
import tempfile
import sys
import unittest

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), "..")))

from redblacktree import EventLogger, Tree


class EventLoggerSyncTest(unittest.TestCase):
    def test_sync_reads_appended_lines(self):
        with tempfile.TemporaryDirectory() as tmpdir:
            log_path = os.path.join(tmpdir, "trace", "log.txt")
            writer = EventLogger(log_path)
            reader = EventLogger(log_path)
            writer.log("first")
            reader.sync()
            events = reader.get_events()
            self.assertTrue(any("first" in e for e in events))
            writer.close()
            reader.close()

    def test_sync_keeps_lines_written_before_own_entry(self):
        with tempfile.TemporaryDirectory() as tmpdir:
            log_path = os.path.join(tmpdir, "log.txt")
            a = EventLogger(log_path)
            b = EventLogger(log_path)
            a.log("from-a")
            b.log("from-b")
            b.sync()
            events = b.get_events()
            self.assertTrue(any("from-a" in e for e in events))
            self.assertEqual(sum("from-b" in e for e in events), 1)

            a.sync()
            a_events = a.get_events()
            self.assertTrue(any("from-b" in e for e in a_events))
            self.assertEqual(sum("from-a" in e for e in a_events), 1)
            a.close()
            b.close()

    def test_memory_only_logger(self):
        logger = EventLogger(max_events=2)
        for msg in ("a", "b", "c"):
            logger.log(msg)
        events = logger.get_events()
        self.assertEqual(len(events), 2)
        self.assertTrue(events[0].endswith("] b"))
        self.assertEqual(logger.get_events(offset=1, limit=1), events[1:])
        logger.sync()
        logger.close()


class TreeTraceTest(unittest.TestCase):
    def test_trace_disabled_by_default(self):
        events = EventLogger()
        tree = Tree(event_logger=events)
        for key in (7, 3, 1):
            tree.put(key, key)
        self.assertEqual(events.get_events(), [])

    def test_trace_records_fixup_steps(self):
        events = EventLogger()
        tree = Tree(trace=True, event_logger=events)
        for key in (7, 3, 18, 10):
            tree.put(key, key)
        messages = events.get_events()
        self.assertTrue(any("flip colors at 7" in m for m in messages))
        self.assertTrue(any("put 10: new red node" in m for m in messages))

    def test_trace_does_not_change_shape(self):
        keys = [7, 3, 18, 10, 8, 11, 22, 26, 30]
        plain, traced = Tree(), Tree(trace=True, event_logger=EventLogger())
        for key in keys:
            plain.put(key, key)
            traced.put(key, key)
        self.assertEqual(str(plain), str(traced))

    def test_trace_falls_back_to_logging(self):
        tree = Tree(trace=True)
        with self.assertLogs("redblacktree.core.tree", level="DEBUG") as captured:
            tree.put(1, "one")
            tree.put(2, "two")
        self.assertTrue(any("rotate left at 1" in line for line in captured.output))


if __name__ == "__main__":
    unittest.main()
