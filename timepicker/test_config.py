import unittest
import json
import logging
import os
import sys
import tempfile
from unittest import mock

# Add the parent directory to the Python path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from timepicker.config import CONFIG_FILENAME, DEFAULT_CONFIG, get_testing_mode, get_workflow_data_dir, load_config
from timepicker.logger import LOG_FILENAME, setup_logger


class TestConfig(unittest.TestCase):
    def setUp(self):
        """Point the workflow data directory at a scratch folder"""
        self.temp_dir = tempfile.TemporaryDirectory()
        self.data_dir = os.path.join(self.temp_dir.name, 'data')
        self.env = mock.patch.dict(os.environ, {'alfred_workflow_data': self.data_dir})
        self.env.start()

    def tearDown(self):
        self.env.stop()
        self.temp_dir.cleanup()

    def write_config(self, content):
        os.makedirs(self.data_dir, exist_ok=True)
        with open(os.path.join(self.data_dir, CONFIG_FILENAME), 'w') as f:
            f.write(content)

    def test_missing_file_gives_defaults(self):
        self.assertEqual(load_config(), DEFAULT_CONFIG)
        self.assertFalse(get_testing_mode())
        # Reading config must not create the data directory
        self.assertFalse(os.path.exists(self.data_dir))

    def test_values_are_loaded(self):
        self.write_config(json.dumps({
            'testing_mode': True,
            'default_period': 'am',
            'minute_step': 5,
        }))
        config = load_config()
        self.assertTrue(config['testing_mode'])
        self.assertEqual(config['default_period'], 'AM')
        self.assertEqual(config['minute_step'], 5)
        self.assertEqual(config['hour_step'], 1)
        self.assertTrue(get_testing_mode())

    def test_bad_values_fall_back_to_defaults(self):
        test_cases = [
            ({'default_period': 'noon'}, 'default_period', 'PM'),
            ({'hour_step': 0}, 'hour_step', 1),
            ({'minute_step': -5}, 'minute_step', 1),
            ({'second_step': '10'}, 'second_step', 1),
            ({'second_step': True}, 'second_step', 1),
        ]

        for stored, key, expected in test_cases:
            with self.subTest(stored=stored):
                self.write_config(json.dumps(stored))
                with self.assertLogs('config', level='WARNING'):
                    config = load_config()
                self.assertEqual(config[key], expected)

    def test_unreadable_file_gives_defaults(self):
        for content in ('{not json', '[1, 2, 3]'):
            with self.subTest(content=content):
                self.write_config(content)
                with self.assertLogs('config', level='WARNING'):
                    self.assertEqual(load_config(), DEFAULT_CONFIG)

    def test_explicit_config_file(self):
        path = os.path.join(self.temp_dir.name, 'other.json')
        with open(path, 'w') as f:
            json.dump({'hour_step': 2}, f)
        self.assertEqual(load_config(path)['hour_step'], 2)

    def test_data_dir_is_created(self):
        self.assertEqual(get_workflow_data_dir(), self.data_dir)
        self.assertTrue(os.path.isdir(self.data_dir))


class TestLogger(unittest.TestCase):
    def setUp(self):
        self.temp_dir = tempfile.TemporaryDirectory()
        self.env = mock.patch.dict(os.environ, {'alfred_workflow_data': self.temp_dir.name})
        self.env.start()
        self.root_handlers = list(logging.root.handlers)
        self.root_level = logging.root.level

    def tearDown(self):
        for handler in list(logging.root.handlers):
            if handler not in self.root_handlers:
                logging.root.removeHandler(handler)
                handler.close()
        logging.root.setLevel(self.root_level)
        self.env.stop()
        self.temp_dir.cleanup()

    def test_no_file_logging_outside_testing(self):
        logger = setup_logger('test_quiet')
        self.assertEqual(logger.name, 'test_quiet')
        self.assertEqual(logging.root.handlers, self.root_handlers)
        self.assertFalse(os.path.exists(os.path.join(self.temp_dir.name, LOG_FILENAME)))

    def test_testing_mode_writes_shared_log(self):
        first = setup_logger('test_first', testing=True)
        setup_logger('test_second', testing=True)

        log_file = os.path.join(self.temp_dir.name, LOG_FILENAME)
        file_handlers = [h for h in logging.root.handlers
                         if isinstance(h, logging.FileHandler) and h.baseFilename == log_file]
        self.assertEqual(len(file_handlers), 1)

        first.debug("picked 5:00:00 PM")
        file_handlers[0].flush()
        with open(log_file) as f:
            content = f.read()
        self.assertIn('Logging started at', content)
        self.assertIn('test_first - DEBUG - picked 5:00:00 PM', content)


if __name__ == '__main__':
    unittest.main()
