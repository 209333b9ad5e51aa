# /tests/test_urls.py

import unittest
import sys
import os

# Add root directory to path to allow imports from 'discovery'
sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from discovery.urls import is_http_url, normalize_url


class TestNormalizeUrl(unittest.TestCase):

    def test_equivalent_urls_share_a_key(self):
        variants = [
            "https://www.coursera.org/learn/ai-for-everyone",
            "HTTPS://WWW.Coursera.org/learn/ai-for-everyone/",
            "https://coursera.org:443/learn/ai-for-everyone#reviews",
            "https://www.coursera.org/learn/ai-for-everyone?utm_source=newsletter&utm_medium=email",
            "https://coursera.org/learn/ai-for-everyone?gclid=abc123&fbclid=xyz",
        ]
        keys = {normalize_url(url) for url in variants}
        self.assertEqual(keys, {"https://coursera.org/learn/ai-for-everyone"})

    def test_remaining_query_parameters_are_sorted(self):
        self.assertEqual(
            normalize_url("https://www.edx.org/search?tab=course&q=ai&ref=home"),
            "https://edx.org/search?q=ai&tab=course",
        )

    def test_path_case_and_non_default_port_are_kept(self):
        self.assertEqual(
            normalize_url("http://Example.com:8080/Course/AI"),
            "http://example.com:8080/Course/AI",
        )

    def test_scheme_distinguishes_urls(self):
        self.assertNotEqual(normalize_url("http://example.com/a"), normalize_url("https://example.com/a"))


class TestIsHttpUrl(unittest.TestCase):

    def test_accepts_http_and_https(self):
        self.assertTrue(is_http_url("https://learn.microsoft.com/en-us/training/"))
        self.assertTrue(is_http_url("http://example.com"))

    def test_rejects_everything_else(self):
        for value in ("", "   ", None, 42, "ftp://example.com/file", "mailto:someone@example.com",
                      "www.coursera.org/learn/x", "https://", "javascript:alert(1)"):
            with self.subTest(value=value):
                self.assertFalse(is_http_url(value))


if __name__ == '__main__':
    unittest.main()
