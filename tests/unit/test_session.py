import os
import tempfile
import unittest
from pathlib import Path

from filemove.errors import PathNotFoundError, SameDirectoryError
from filemove.ledger import MoveLedger
from filemove.session import Session
from filemove.visibility import DotPrefixStrategy, VisibilityState


class TestMoveLedger(unittest.TestCase):
    def test_record_keeps_order_and_duplicates(self):
        ledger = MoveLedger()
        ledger.record(["b", "a"])
        ledger.record([])
        ledger.record(["b"])
        self.assertEqual(ledger.snapshot(), ["b", "a", "b"])
        self.assertEqual(len(ledger), 3)

    def test_snapshot_is_a_copy(self):
        ledger = MoveLedger()
        ledger.record(["a"])
        snap = ledger.snapshot()
        snap.append("x")
        self.assertEqual(ledger.snapshot(), ["a"])

    def test_reset(self):
        ledger = MoveLedger()
        ledger.record(["a"])
        ledger.reset()
        self.assertEqual(ledger.snapshot(), [])
        self.assertFalse(ledger)


class TestSession(unittest.TestCase):
    def setUp(self):
        self._tmp = tempfile.TemporaryDirectory()
        tmp = Path(self._tmp.name)
        self.src = tmp / "src"
        self.other_src = tmp / "other"
        self.dst = tmp / "dst"
        for d in (self.src, self.other_src, self.dst):
            d.mkdir()
        self.session = Session(DotPrefixStrategy(), show_progress=False)

    def tearDown(self):
        self._tmp.cleanup()

    def test_move_then_toggle_example(self):
        (self.src / "report.pdf").write_text("pdf")
        (self.src / "notes.txt").write_text("txt")
        self.session.select_source(self.src)
        self.session.select_destination(self.dst)

        moved = self.session.move_files()
        self.assertCountEqual(moved, ["report.pdf", "notes.txt"])
        self.assertCountEqual(self.session.ledger.snapshot(), ["report.pdf", "notes.txt"])

        report = self.session.toggle_visibility()
        self.assertTrue(report.hidden)
        self.assertEqual(sorted(os.listdir(self.dst)), [".notes.txt", ".report.pdf"])
        self.assertIs(self.session.state, VisibilityState.HIDDEN)

        report = self.session.toggle_visibility()
        self.assertFalse(report.hidden)
        self.assertEqual(sorted(os.listdir(self.dst)), ["notes.txt", "report.pdf"])
        self.assertIs(self.session.state, VisibilityState.SHOWN)

    def test_toggle_only_touches_moved_files(self):
        (self.dst / "resident.txt").write_text("was here first")
        (self.src / "new.txt").write_text("n")

        self.session.move_files(self.src, self.dst)
        self.session.toggle_visibility()

        self.assertEqual(sorted(os.listdir(self.dst)), [".new.txt", "resident.txt"])

    def test_ledger_accumulates_moves(self):
        self.session.select_source(self.src)
        self.session.select_destination(self.dst)
        (self.src / "first.txt").write_text("1")
        self.session.move_files()
        (self.src / "second.txt").write_text("2")
        self.session.move_files()

        self.assertEqual(self.session.ledger.snapshot(), ["first.txt", "second.txt"])

    def test_failed_moves_not_recorded(self):
        (self.src / "a.txt").write_text("a")
        (self.src / "b.txt").write_text("b")
        (self.dst / "b.txt").write_text("taken")

        moved = self.session.move_files(self.src, self.dst)

        self.assertEqual(moved, ["a.txt"])
        self.assertEqual(self.session.ledger.snapshot(), ["a.txt"])
        self.assertEqual(len(self.session.last_move.failed), 1)

    def test_changing_source_resets_ledger(self):
        (self.src / "a.txt").write_text("a")
        self.session.move_files(self.src, self.dst)
        self.assertEqual(len(self.session.ledger), 1)

        self.session.select_source(self.other_src)

        self.assertEqual(self.session.ledger.snapshot(), [])
        self.assertIsNone(self.session.toggle_visibility())
        self.assertTrue((self.dst / "a.txt").exists())

    def test_reselecting_same_source_keeps_ledger(self):
        (self.src / "a.txt").write_text("a")
        self.session.move_files(self.src, self.dst)

        self.session.select_source(str(self.src))

        self.assertEqual(self.session.ledger.snapshot(), ["a.txt"])

    def test_changing_destination_resets_ledger(self):
        d1 = self.dst
        d2 = self.dst.parent / "dst2"
        d2.mkdir()
        (d2 / "a.txt").write_text("resident")
        (self.src / "a.txt").write_text("moved")

        self.session.move_files(self.src, d1)
        self.session.select_destination(d2)

        self.assertEqual(self.session.ledger.snapshot(), [])
        self.assertIsNone(self.session.toggle_visibility())
        self.assertEqual(os.listdir(d1), ["a.txt"])
        self.assertEqual(os.listdir(d2), ["a.txt"])
        self.assertEqual((d2 / "a.txt").read_text(), "resident")

    def test_changing_destination_resets_hidden_state(self):
        d2 = self.dst.parent / "dst2"
        d2.mkdir()
        (self.src / "a.txt").write_text("a")
        self.session.move_files(self.src, self.dst)
        self.session.toggle_visibility()
        self.assertIs(self.session.state, VisibilityState.HIDDEN)

        self.session.select_destination(d2)

        self.assertIs(self.session.state, VisibilityState.SHOWN)
        self.assertEqual(os.listdir(self.dst), [".a.txt"])

    def test_reselecting_same_destination_keeps_ledger(self):
        (self.src / "a.txt").write_text("a")
        self.session.move_files(self.src, self.dst)

        self.session.select_destination(str(self.dst))

        self.assertEqual(self.session.ledger.snapshot(), ["a.txt"])

    def test_toggle_with_nothing_moved(self):
        self.session.select_destination(self.dst)
        self.assertIsNone(self.session.toggle_visibility())
        self.assertIs(self.session.state, VisibilityState.SHOWN)

    def test_move_without_selection_fails(self):
        with self.assertRaises(PathNotFoundError):
            self.session.move_files()

    def test_move_same_directory_fails(self):
        (self.src / "a.txt").write_text("a")
        with self.assertRaises(SameDirectoryError):
            self.session.move_files(self.src, self.src)
        self.assertEqual(os.listdir(self.src), ["a.txt"])
        self.assertEqual(self.session.ledger.snapshot(), [])

    def test_set_files_visibility_twice_is_noop(self):
        (self.dst / "a").write_text("a")
        (self.dst / "b").write_text("b")

        self.session.set_files_visibility(self.dst, ["a", "b"], True)
        report = self.session.set_files_visibility(self.dst, ["a", "b"], True)

        self.assertEqual(report.succeeded, {"a", "b"})
        self.assertEqual(report.unchanged, {"a", "b"})
        self.assertEqual(sorted(os.listdir(self.dst)), [".a", ".b"])
        self.assertIs(self.session.last_visibility, report)

    def test_set_files_visibility_invalid_directory(self):
        with self.assertRaises(PathNotFoundError):
            self.session.set_files_visibility(self.dst / "nope", ["a"], True)

    def test_pick_directory(self):
        self.assertEqual(self.session.pick_directory(lambda: str(self.dst)), self.dst.resolve())
        self.assertIsNone(self.session.pick_directory(lambda: None))
        self.assertIsNone(self.session.pick_directory(lambda: ""))
        with self.assertRaises(PathNotFoundError):
            self.session.pick_directory(lambda: str(self.dst / "missing"))


if __name__ == '__main__':
    unittest.main()
