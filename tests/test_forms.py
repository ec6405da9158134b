"""Unit tests for form parsing: trimming, blank optionals and localized errors."""

import unittest

from pacs_site.core.errors import ValidationError
from pacs_site.schemas.forms import ContactForm, EventForm, RegistrationForm, parse_form


class TestParseForm(unittest.TestCase):
    def test_strips_and_blanks_become_none(self) -> None:
        form = parse_form(
            ContactForm,
            {"name": " Marc ", "email": "m@example.org", "phone": "", "message": "Salut", "extra": "x"},
        )
        self.assertEqual(form.name, "Marc")
        self.assertIsNone(form.phone)
        self.assertIsNone(form.subject)

    def test_registration_event_id_parsed(self) -> None:
        form = parse_form(RegistrationForm, {"event_id": "2", "name": "Léa", "email": "l@example.org"})
        self.assertEqual(form.event_id, 2)

    def test_registration_error_message(self) -> None:
        with self.assertRaises(ValidationError) as ctx:
            parse_form(RegistrationForm, {"event_id": "abc", "name": "Léa", "email": "l@example.org"})
        self.assertEqual(ctx.exception.message, "Tous les champs requis manquent.")

    def test_event_capacity_optional(self) -> None:
        data = {"title": "Atelier", "date": "2025-09-21", "start_time": "10:00", "location": "Salle 2"}
        self.assertIsNone(parse_form(EventForm, {**data, "capacity": ""}).capacity)
        self.assertEqual(parse_form(EventForm, {**data, "capacity": "12"}).capacity, 12)
        with self.assertRaises(ValidationError):
            parse_form(EventForm, {**data, "capacity": "-1"})
        with self.assertRaises(ValidationError):
            parse_form(EventForm, {**data, "start_time": "10h"})


if __name__ == "__main__":
    unittest.main()
