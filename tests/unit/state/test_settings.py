# coding: utf-8
# Copyright (c) Max-Planck-Institut für Eisenforschung GmbH - Computational Materials Design (CM) Department
# Distributed under the terms of "New BSD License", see the LICENSE file.
import os
from configparser import ConfigParser
from pathlib import Path
from tempfile import TemporaryDirectory
from unittest import TestCase, mock

from autopresenter.state import state
from autopresenter.state.settings import CONFIG_ENVIRONMENT_NAME, Settings
from autopresenter.state.settings import settings as s


class TestSettings(TestCase):
    @classmethod
    def setUpClass(cls) -> None:
        cls.parser = ConfigParser(inline_comment_prefixes=(";",))
        cls.backup_config = dict(s.configuration)

    @classmethod
    def tearDownClass(cls) -> None:
        s.update(cls.backup_config)

    def setUp(self) -> None:
        super().setUp()
        self.tmp = TemporaryDirectory()
        self.config_file = Path(self.tmp.name) / "autopresenter.cfg"
        # point at a file that does not exist yet, so a user's ~/.autopresenter never leaks in
        env = {
            k: v for k, v in os.environ.items() if not k.startswith("AUTOPRESENTER")
        }
        env[CONFIG_ENVIRONMENT_NAME] = str(self.config_file)
        self.env = mock.patch.dict(os.environ, env, clear=True)
        self.env.start()
        s.update()

    def tearDown(self) -> None:
        self.env.stop()
        self.tmp.cleanup()
        super().tearDown()

    def _write_config(self, **values):
        self.parser["DEFAULT"] = values
        with open(self.config_file, "w") as f:
            self.parser.write(f)

    def test_singleton(self):
        self.assertIs(s, Settings())
        self.assertIs(s, state.settings)

    def test_default_works(self):
        self.assertDictEqual(s.default_configuration, s.configuration)
        self.assertEqual("error", s.missing_field)
        self.assertFalse(s.hidden_field_warning)

    def test_update_from_dict(self):
        s.update({"missing_field": "None", "hidden_field_warning": "yes"})
        self.assertEqual("none", s.missing_field)
        self.assertTrue(s.hidden_field_warning)

        state.update({"hidden_field_warning": True})
        self.assertEqual(
            "error", s.missing_field, msg="Each update starts from the defaults"
        )
        self.assertTrue(s.hidden_field_warning)

    def test_invalid_values(self):
        with self.assertRaises(ValueError):
            s.update({"missing_field": "ignore"})
        with self.assertRaises(ValueError):
            s.update({"hidden_field_warning": "maybe"})
        with self.assertRaises(KeyError):
            s.update({"not_a_setting": 1})

    def test_update_from_environment(self):
        os.environ["AUTOPRESENTERMISSINGFIELD"] = "none"
        os.environ["AUTOPRESENTERHIDDENFIELDWARNING"] = "true"
        s.update()
        self.assertEqual("none", s.missing_field)
        self.assertTrue(s.hidden_field_warning)

    def test_update_from_file(self):
        self._write_config(MISSING_FIELD="none", HIDDEN_FIELD_WARNING="on")
        s.update()
        self.assertEqual("none", s.missing_field)
        self.assertTrue(s.hidden_field_warning)

    def test_update_order(self):
        self._write_config(MISSING_FIELD="none")
        os.environ["AUTOPRESENTERHIDDENFIELDWARNING"] = "true"
        s.update()
        self.assertEqual(
            "error",
            s.missing_field,
            msg="Environment variables take precedence over the whole config file",
        )
        self.assertTrue(s.hidden_field_warning)

        s.update({"missing_field": "none"})
        self.assertEqual("none", s.missing_field)
        self.assertFalse(
            s.hidden_field_warning,
            msg="A user dictionary takes precedence over the environment",
        )
