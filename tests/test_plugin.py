"""
Tests for the pytest plugin.

Each test writes a small test module that subclasses a suite and runs
it in a nested pytest session with pytester.
"""

import pytest

STREAM_FACTORY = "http_factory_test.reference:StreamFactory"

STREAM_SUITE = """
from http_factory_test.suites import StreamFactoryTestCase


class TestConfiguredStreamFactory(StreamFactoryTestCase):
    pass
"""

# Passing tests in StreamFactoryTestCase, parametrized cases included
STREAM_SUITE_TESTS = 10

LEAKY_SUITE = """
import os
import sys
from http.cookies import SimpleCookie
from urllib.parse import parse_qsl

from http_factory_test.reference import ServerRequestFactory, UriFactory
from http_factory_test.suites import ServerRequestFactoryTestCase


class LeakyServerRequestFactory(ServerRequestFactory):
    def create_server_request(self, server, method=None, uri=None):
        request = super().create_server_request({**os.environ, **server}, method, uri)
        cookie = SimpleCookie(os.environ.get("HTTP_COOKIE", ""))
        request = request.with_cookie_params({name: morsel.value for name, morsel in cookie.items()})
        request = request.with_query_params(dict(parse_qsl(os.environ.get("QUERY_STRING", ""))))
        content_type = os.environ.get("CONTENT_TYPE", "")
        if content_type.startswith("multipart/"):
            request = request.with_uploaded_files({"upload": "leaked"})
        if content_type:
            request = request.with_parsed_body(dict(parse_qsl(sys.stdin.read())))
        return request


class TestLeakyServerRequestFactory(ServerRequestFactoryTestCase):
    def create_server_request_factory(self):
        return LeakyServerRequestFactory()

    def create_uri(self, uri):
        return UriFactory().create_uri(uri)
"""


class TestFactoryOptions:
    """Test the three ways of naming the factory under test."""

    def test_command_line_option(self, pytester: pytest.Pytester) -> None:
        """Test configuring the factory with --stream-factory."""
        pytester.makepyfile(STREAM_SUITE)

        result = pytester.runpytest(f"--stream-factory={STREAM_FACTORY}")

        result.assert_outcomes(passed=STREAM_SUITE_TESTS)

    def test_ini_option(self, pytester: pytest.Pytester) -> None:
        """Test configuring the factory in the ini file."""
        pytester.makeini(f"[pytest]\nstream_factory = {STREAM_FACTORY}\n")
        pytester.makepyfile(STREAM_SUITE)

        result = pytester.runpytest()

        result.assert_outcomes(passed=STREAM_SUITE_TESTS)

    def test_environment_variable(self, pytester: pytest.Pytester, monkeypatch: pytest.MonkeyPatch) -> None:
        """Test configuring the factory through the environment."""
        monkeypatch.setenv("HTTP_FACTORY_STREAM_FACTORY", STREAM_FACTORY)
        pytester.makepyfile(STREAM_SUITE)

        result = pytester.runpytest()

        result.assert_outcomes(passed=STREAM_SUITE_TESTS)

    def test_missing_configuration(self, pytester: pytest.Pytester, monkeypatch: pytest.MonkeyPatch) -> None:
        """Test that an unconfigured suite errors with a helpful message."""
        monkeypatch.delenv("HTTP_FACTORY_STREAM_FACTORY", raising=False)
        pytester.makepyfile(STREAM_SUITE)

        result = pytester.runpytest()

        result.assert_outcomes(errors=STREAM_SUITE_TESTS)
        result.stdout.fnmatch_lines(["*Configuration error: no stream factory configured*"])

    def test_unimportable_factory(self, pytester: pytest.Pytester) -> None:
        """Test that a bad dotted path is reported for every test."""
        pytester.makepyfile(STREAM_SUITE)

        result = pytester.runpytest("--stream-factory=missing_module:Factory")

        result.assert_outcomes(errors=STREAM_SUITE_TESTS)
        result.stdout.fnmatch_lines(["*cannot import module 'missing_module'*"])

    def test_report_header(self, pytester: pytest.Pytester) -> None:
        """Test that configured factories are listed in the header."""
        pytester.makepyfile(STREAM_SUITE)

        result = pytester.runpytest(f"--stream-factory={STREAM_FACTORY}")

        result.stdout.fnmatch_lines([f"http-factory: stream = {STREAM_FACTORY}"])

    def test_help(self, pytester: pytest.Pytester) -> None:
        """Test that the options are documented in --help."""
        result = pytester.runpytest("--help")

        result.stdout.fnmatch_lines([
            "*HTTP message factory conformance*",
            "*--server-request-factory=PATH*",
        ])


class TestIsolation:
    """Test that the server request suite catches leaking factories."""

    def test_leaky_factory_fails_isolation_tests(self, pytester: pytest.Pytester) -> None:
        """Test a factory that reads the environment and stdin, including the CGI keys for method and URI."""
        pytester.makepyfile(LEAKY_SUITE)

        result = pytester.runpytest()

        result.assert_outcomes(passed=25, failed=9)
        result.stdout.fnmatch_lines([
            "*test_create_server_request_does_not_read_server_environment*",
            "*test_create_server_request_does_not_read_cookie_environment*",
            "*test_create_server_request_does_not_read_query_environment*",
            "*test_create_server_request_does_not_read_uploaded_files*",
            "*test_create_server_request_does_not_read_posted_body*",
            "*test_create_server_request_is_independent_of_environment*",
            "*test_create_server_request_does_not_read_uri_from_environment*",
            "*test_create_server_request_does_not_read_scheme_from_environment*",
            "*test_create_server_request_does_not_read_method_from_environment*",
        ])
