import os
import sys
import unittest

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), "..")))

from redblacktree import EventLogger, MemTable, check_invariants


class MemTableTest(unittest.TestCase):
    def test_put_get_and_capacity(self):
        table = MemTable(3)
        table.put("k2", "v2")
        table.put("k1", "v1")
        self.assertEqual(table.get("k1"), "v1")
        self.assertIsNone(table.get("missing"))
        self.assertFalse(table.is_full())
        table.put("k3", "v3")
        self.assertTrue(table.is_full())
        # capacity is advisory
        table.put("k4", "v4")
        self.assertEqual(len(table), 4)

    def test_overwrite_does_not_grow(self):
        table = MemTable(10)
        table.put("k1", "v1")
        table.put("k1", "v1+")
        self.assertEqual(table.get("k1"), "v1+")
        self.assertEqual(len(table), 1)

    def test_sorted_items_and_scan(self):
        table = MemTable(100)
        for key in [50, 20, 80, 10, 30, 70, 90]:
            table.put(key, key * 10)
        self.assertEqual(
            table.get_sorted_items(),
            [(10, 100), (20, 200), (30, 300), (50, 500), (70, 700), (80, 800), (90, 900)],
        )
        self.assertEqual(table.scan(20, 70), [(20, 200), (30, 300), (50, 500)])
        self.assertIn(30, table)
        self.assertNotIn(31, table)
        self.assertEqual(check_invariants(table.tree), [])

    def test_clear(self):
        events = EventLogger()
        table = MemTable(2, event_logger=events)
        table.put("a", 1)
        table.clear()
        self.assertEqual(len(table), 0)
        self.assertIsNone(table.get("a"))
        messages = events.get_events()
        self.assertTrue(any("MemTable" in m and "inicializado" in m for m in messages))
        self.assertTrue(messages[-1].endswith("MemTable: limpo."))

    def test_trace_reaches_event_logger(self):
        events = EventLogger()
        table = MemTable(10, event_logger=events, trace=True)
        for key in (7, 3, 1):
            table.put(key, key)
        self.assertTrue(any("rotate right at 7" in m for m in events.get_events()))
        table.clear()
        table.put(1, 1)
        table.put(2, 2)
        self.assertTrue(any("rotate left at 1" in m for m in events.get_events()))


if __name__ == "__main__":
    unittest.main()
