import os
import shutil
import tempfile
import unittest
from pathlib import Path
from unittest import mock

from clearwrite.config import DEFAULT_TONES, Config, find_config, load_config_file

CONFIG_ENV_VARS = ['MODEL', 'TEMPERATURE', 'MAX_OUTPUT_TOKENS', 'BACKEND', 'GEMINI_API_BASE',
                   'GEMINI_OPENAI_BASE', 'REQUEST_TIMEOUT', 'TONES']


class ConfigTests(unittest.TestCase):

    def setUp(self):
        patcher = mock.patch.dict(os.environ)
        patcher.start()
        self.addCleanup(patcher.stop)
        for name in CONFIG_ENV_VARS:
            os.environ.pop(name, None)

        self.tmpdir = tempfile.mkdtemp()
        self.addCleanup(shutil.rmtree, self.tmpdir)

    def write(self, name, content):
        path = os.path.join(self.tmpdir, name)
        with open(path, 'w', encoding='utf-8') as f:
            f.write(content)
        return path

    def test_defaults(self):
        config = Config()
        self.assertEqual(config['model'], 'gemini-2.0-flash')
        self.assertEqual(config['temperature'], 0.2)
        self.assertEqual(config['max_output_tokens'], 1024)
        self.assertEqual(config['backend'], 'rest')
        self.assertEqual(config['tones'], DEFAULT_TONES)
        self.assertIsNone(config['missing'])
        self.assertEqual(config.get('missing', 'x'), 'x')

    def test_environment_overrides(self):
        os.environ.update({'MODEL': 'gemini-1.5-pro', 'TEMPERATURE': '0.7', 'TONES': 'terse, warm ,'})
        config = Config()
        self.assertEqual(config['model'], 'gemini-1.5-pro')
        self.assertEqual(config['temperature'], 0.7)
        self.assertEqual(config['tones'], ['terse', 'warm'])

    def test_yaml_file_overrides_environment(self):
        os.environ['MODEL'] = 'from-env'
        path = self.write('clearwrite.yaml', "model: from-yaml\nbackend: sdk\n")
        config = Config(path)
        self.assertEqual(config['model'], 'from-yaml')
        self.assertEqual(config['backend'], 'sdk')

    def test_update_skips_none(self):
        config = Config()
        config.update({'model': None, 'backend': 'sdk'})
        self.assertEqual(config['model'], 'gemini-2.0-flash')
        self.assertEqual(config['backend'], 'sdk')

    def test_empty_file(self):
        self.assertEqual(load_config_file(self.write('empty.yaml', '')), {})

    def test_invalid_files(self):
        with self.assertRaises(ValueError):
            load_config_file(self.write('list.yaml', "- a\n- b\n"))
        with self.assertRaises(ValueError):
            load_config_file(self.write('broken.yaml', "model: [unclosed\n"))
        with self.assertRaises(ValueError):
            load_config_file(os.path.join(self.tmpdir, 'nope.yaml'))

    def test_find_config_searches_parents(self):
        self.write('clearwrite.yaml', "model: x\n")
        nested = os.path.join(self.tmpdir, 'a', 'b')
        os.makedirs(nested)
        with mock.patch('clearwrite.config.Path.cwd', return_value=Path(nested)):
            found = find_config()
        self.assertEqual(os.path.realpath(found), os.path.realpath(os.path.join(self.tmpdir, 'clearwrite.yaml')))


if __name__ == '__main__':
    unittest.main()
