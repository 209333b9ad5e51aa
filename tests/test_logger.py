# /tests/test_logger.py

import unittest
import sys
import os

from pythonjsonlogger import jsonlogger

# Add root directory to path to allow imports from 'pathway'
sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from pathway.logger import get_logger


class TestGetLogger(unittest.TestCase):

    def test_module_loggers_share_one_package_handler(self):
        first = get_logger("discovery.some_module")
        second = get_logger("discovery.other_module")
        get_logger("discovery.some_module")

        package_logger = first.parent
        self.assertEqual(package_logger.name, "discovery")
        self.assertIs(second.parent, package_logger)
        self.assertEqual(first.handlers, [])
        self.assertEqual(second.handlers, [])
        self.assertEqual(len(package_logger.handlers), 1)
        self.assertIsInstance(package_logger.handlers[0].formatter, jsonlogger.JsonFormatter)

    def test_packages_reuse_the_same_handler(self):
        pathway_handlers = get_logger("pathway.some_module").parent.handlers
        api_handlers = get_logger("api.some_module").parent.handlers
        self.assertIs(pathway_handlers[0], api_handlers[0])


if __name__ == '__main__':
    unittest.main()
