"""
Tests for the package surface
"""
import logging

import klarna_payments


class TestPackageImport:
    """Tests for importing the package."""

    def test_import(self):
        """Should import and expose the public API."""
        assert klarna_payments.__version__ == "0.1.0"
        for name in klarna_payments.__all__:
            assert hasattr(klarna_payments, name), name

    def test_logging_submodule(self):
        """Should keep the logging helpers reachable as a submodule."""
        from klarna_payments.logging import mask_headers

        assert klarna_payments.logging.mask_headers is mask_headers

    def test_null_handler_installed(self):
        """Should install a NullHandler on the package logger."""
        handlers = logging.getLogger("klarna_payments").handlers

        assert any(isinstance(handler, logging.NullHandler) for handler in handlers)
