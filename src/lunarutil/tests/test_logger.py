#
#    Copyright (c) 2020-2024 Tom Keffer <tkeffer@gmail.com>
#
#    See the file LICENSE.txt for your full rights.
#
"""Test modules lunarutil.logger and lunarutil.startup"""
import doctest
import logging
import os.path
import tempfile
import unittest

import lunarphase
import lunarutil.logger
import lunarutil.startup

log = logging.getLogger(__name__)


class TestLogger(unittest.TestCase):

    def setUp(self):
        self.old_debug = lunarphase.debug

    def tearDown(self):
        lunarphase.debug = self.old_debug

    def test_defaults(self):
        lunarphase.debug = False
        log_dict = lunarutil.logger.setup('test_logger', {})
        self.assertEqual(log_dict['version'], 1)
        self.assertFalse(log_dict['disable_existing_loggers'])
        self.assertEqual(log_dict['root']['level'], 'INFO')
        self.assertEqual(log_dict['root']['handlers'], ['console'])
        self.assertEqual(log_dict['formatters']['standard']['format'],
                         "test_logger[%(process)d] %(levelname)s %(name)s: %(message)s")
        self.assertEqual(log_dict['handlers']['rotate']['filename'], 'test_logger.log')
        self.assertEqual(log_dict['handlers']['rotate']['maxBytes'], 10000000)
        self.assertIs(log_dict['handlers']['rotate']['delay'], True)
        self.assertEqual(logging.getLogger().level, logging.INFO)

    def test_debug(self):
        lunarphase.debug = True
        log_dict = lunarutil.logger.setup('test_logger', {})
        self.assertEqual(log_dict['root']['level'], 'DEBUG')
        self.assertEqual(logging.getLogger().level, logging.DEBUG)

    def test_user_override(self):
        lunarutil.logger.setup('test_logger', {'Logging': {'root': {'level': 'WARNING'}}})
        self.assertEqual(logging.getLogger().level, logging.WARNING)

    def test_log_traceback(self):
        try:
            raise ValueError("bad moon")
        except ValueError:
            with self.assertLogs(__name__, level='ERROR') as cm:
                lunarutil.logger.log_traceback(log.error, '**** ')
        self.assertTrue(all(line.startswith('ERROR:%s:**** ' % __name__) for line in cm.output))
        self.assertIn('bad moon', cm.output[-1])

    def test_doctests(self):
        self.assertEqual(doctest.testmod(lunarutil.logger).failed, 0)


class TestStartup(unittest.TestCase):

    def setUp(self):
        self.old_debug = lunarphase.debug
        self.tmpdir = tempfile.TemporaryDirectory()
        self.addCleanup(self.tmpdir.cleanup)

    def tearDown(self):
        lunarphase.debug = self.old_debug

    def _write(self, contents):
        path = os.path.join(self.tmpdir.name, 'lunarphase.conf')
        with open(path, 'w') as fd:
            fd.write(contents)
        return path

    def test_start_defaults(self):
        config_path, config_dict = lunarutil.startup.start()
        self.assertIsNone(config_path)
        self.assertFalse(lunarphase.debug)
        self.assertEqual(config_dict['log_label'], 'lunarphase')

    def test_start_with_debug(self):
        path = self._write("debug = yes\nlog_label = moonclock\n")
        with self.assertLogs('lunarutil.startup', level='INFO') as cm:
            config_path, _ = lunarutil.startup.start(path)
        self.assertEqual(config_path, path)
        self.assertTrue(lunarphase.debug)
        self.assertIn('Initializing moonclock version %s' % lunarphase.__version__,
                      cm.output[0])

    def test_bad_debug(self):
        path = self._write("debug = sometimes\n")
        with self.assertRaises(lunarphase.ConfigError):
            lunarutil.startup.start(path)

    def test_bad_handler(self):
        path = self._write("[Logging]\n"
                           "    [[handlers]]\n"
                           "        [[[console]]]\n"
                           "            class = no.such.Handler\n")
        with self.assertLogs('lunarutil.startup', level='ERROR') as cm:
            with self.assertRaises(lunarphase.ConfigError):
                lunarutil.startup.start(path)
        # The traceback of the failure is logged before the error is raised
        self.assertTrue(cm.output[0].endswith('****  Traceback (most recent call last):'))

    def test_label_in_logging_section(self):
        path = self._write("log_label = moonclock\n"
                           "[Logging]\n"
                           "    log_label = tideclock\n")
        with self.assertLogs('lunarutil.startup', level='INFO') as cm:
            lunarutil.startup.start(path)
        self.assertIn('Initializing tideclock version', cm.output[0])


if __name__ == '__main__':
    unittest.main()
