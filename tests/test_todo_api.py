import unittest
from datetime import datetime

from todocli.todo_api.data_models import Task
from todocli.todo_api.search_filters import filter_by_category, filter_by_deadline, parse_deadline


class TestTaskModel(unittest.TestCase):
    def test_defaults(self):
        task = Task(text="Buy milk")
        self.assertFalse(task.done)
        self.assertEqual(task.category, "General")
        self.assertEqual(task.deadline, "No deadline")

    def test_to_dict_key_order(self):
        task = Task(text="Report", done=True, category="Work", deadline="2024-05-01")
        self.assertEqual(list(task.to_dict()), ["text", "done", "category", "deadline"])
        self.assertEqual(
            task.to_dict(),
            {"text": "Report", "done": True, "category": "Work", "deadline": "2024-05-01"},
        )

    def test_from_dict_fills_missing_fields(self):
        task = Task.from_dict({"text": "Call mom"})
        self.assertEqual(task, Task(text="Call mom", done=False, category="General", deadline="No deadline"))

    def test_from_dict_rejects_missing_text(self):
        with self.assertRaises(ValueError):
            Task.from_dict({"done": False})
        with self.assertRaises(ValueError):
            Task.from_dict(["not", "an", "object"])

    def test_from_dict_rejects_non_boolean_done(self):
        for done in ("false", "true", 0, None):
            with self.assertRaises(ValueError):
                Task.from_dict({"text": "A", "done": done})

    def test_from_dict_keeps_stored_empty_strings(self):
        stored = {"text": "A", "done": False, "category": "", "deadline": ""}
        task = Task.from_dict(stored)
        self.assertEqual(task.category, "")
        self.assertEqual(task.deadline, "")
        self.assertEqual(task.to_dict(), stored)


class TestSearchFilters(unittest.TestCase):
    def setUp(self):
        self.tasks = [
            Task(text="Report", category="Work", deadline="2024-01-01"),
            Task(text="Gym", category="Personal", deadline="2024-06-01"),
            Task(text="Standup", category="work"),
        ]

    def test_category_is_case_insensitive(self):
        matches = filter_by_category(self.tasks, "WORK")
        self.assertEqual([t.text for t in matches], ["Report", "Standup"])

    def test_category_is_exact_match(self):
        self.assertEqual(filter_by_category(self.tasks, "Wor"), [])

    def test_deadline_on_or_before(self):
        matches = filter_by_deadline(self.tasks, "2024-03-01")
        self.assertEqual([t.text for t in matches], ["Report"])
        matches = filter_by_deadline(self.tasks, "2024-06-01")
        self.assertEqual([t.text for t in matches], ["Report", "Gym"])

    def test_no_deadline_is_never_matched(self):
        matches = filter_by_deadline(self.tasks, "2999-12-31")
        self.assertNotIn("Standup", [t.text for t in matches])

    def test_unparsable_query_matches_nothing(self):
        self.assertEqual(filter_by_deadline(self.tasks, "someday"), [])
        self.assertEqual(filter_by_deadline(self.tasks, ""), [])

    def test_parse_deadline(self):
        self.assertEqual(parse_deadline("2024-03-01"), datetime(2024, 3, 1))
        self.assertIsNone(parse_deadline("No deadline"))
        self.assertIsNone(parse_deadline("   "))
        self.assertIsNone(parse_deadline(None))

    def test_parse_deadline_accepts_only_iso_dates(self):
        self.assertEqual(parse_deadline(" 2024-03-01 "), datetime(2024, 3, 1))
        self.assertEqual(parse_deadline("2024-03-01T10:30:00Z"), datetime(2024, 3, 1, 10, 30))
        for value in ("Friday", "March", "Dec", "5", "tomorrow", "03/01/2024"):
            self.assertIsNone(parse_deadline(value), value)

    def test_word_deadlines_are_never_matched(self):
        tasks = [Task(text=t, deadline=t) for t in ("Friday", "March", "5", "Dec", "No deadline", "tomorrow")]
        self.assertEqual(filter_by_deadline(tasks, "2024-03-01"), [])
        self.assertEqual(filter_by_deadline(tasks + [Task(text="Real", deadline="2024-02-01")], "2024-03-01"),
                         [Task(text="Real", deadline="2024-02-01")])

